"""Text and JSON formatters for cut plans and stock reports."""

from __future__ import annotations

from typing import Any

from cutplan.domain.value_objects import (
    Assignment,
    Board,
    CutPlan,
    PieceInstance,
    Placement,
    StockResult,
)

from .pricing import CostEstimate


def _inches(value: float) -> str:
    return f'{value:g}"'


def _stock_label(thickness: str, species: str | None) -> str:
    return f"{thickness} {species}" if species else thickness


class CutPlanFormatter:
    """Formats a cut plan as a per-board text report."""

    def format(self, plan: CutPlan) -> str:
        lines = [
            "CUT PLAN",
            "=" * 70,
        ]

        if not plan.assignments:
            lines.append("No pieces placed.")

        for assignment in plan.assignments:
            lines.extend(self._format_assignment(assignment))
            lines.append("")

        lines.append("-" * 70)
        lines.append(
            f"Boards used: {plan.boards_used} of {plan.total_stock_boards}"
        )
        lines.append(f"Pieces placed: {plan.total_pieces_placed}")
        lines.append(f"Efficiency: {plan.efficiency:.1f}%")
        lines.append(f"Waste: {plan.waste:.2f} bd ft")

        if plan.unplaced_pieces:
            lines.append("")
            lines.append(f"UNPLACED PIECES ({len(plan.unplaced_pieces)})")
            for piece in plan.unplaced_pieces:
                lines.append(
                    f"  {piece.unique_id:<16} {piece.name:<20} "
                    f"{_inches(piece.length)} x {_inches(piece.width)}"
                )

        if plan.warnings:
            lines.append("")
            lines.append("WARNINGS")
            for warning in plan.warnings:
                lines.append(f"  - {warning}")

        return "\n".join(lines)

    def _format_assignment(self, assignment: Assignment) -> list[str]:
        board = assignment.board
        usage = (
            assignment.cuts_area / assignment.board_area * 100
            if assignment.board_area > 0
            else 0.0
        )
        lines = [
            f"{board.name} [{board.unique_id}] "
            f"{_inches(board.length)} x {_inches(board.width)} "
            f"({_stock_label(board.thickness, board.species)}) - {usage:.1f}% used",
            f"  {'Piece':<20} {'Length':<9} {'Width':<9} {'X':<9} {'Y':<9} {'Rot'}",
        ]
        for placement in assignment.placements:
            lines.append(
                f"  {placement.piece.name:<20} {placement.placed_length:<9g} "
                f"{placement.placed_width:<9g} {placement.x:<9.3f} "
                f"{placement.y:<9.3f} {'yes' if placement.rotated else ''}"
            )
        return lines


class StockReportFormatter:
    """Formats a stock sizing result, optionally with a cost estimate."""

    def format(self, result: StockResult, estimate: CostEstimate | None = None) -> str:
        lines = [
            "STOCK TO BUY",
            "=" * 70,
        ]

        if not result.boards:
            lines.append("No boards needed.")
            return "\n".join(lines)

        lines.append(
            f"{'Board':<20} {'Size':<16} {'Thickness':<18} {'Qty':<5} {'Bd Ft'}"
        )
        lines.append("-" * 70)
        for board in result.boards:
            size = f"{board.length:g} x {board.width:g}"
            lines.append(
                f"{board.name:<20} {size:<16} "
                f"{_stock_label(board.thickness, board.species):<18} "
                f"{board.quantity:<5} {board.total_board_feet:.2f}"
            )
        lines.append("-" * 70)
        lines.append(
            f"{'TOTAL':<20} {'':<16} {'':<18} {result.boards_needed:<5} "
            f"{result.total_board_feet:.2f}"
        )

        if result.cut_plan is not None:
            lines.append("")
            lines.append(f"Efficiency: {result.cut_plan.efficiency:.1f}%")
            lines.append(f"Waste: {result.cut_plan.waste:.2f} bd ft")
            if result.cut_plan.unplaced_pieces:
                lines.append(
                    f"Pieces without stock: {len(result.cut_plan.unplaced_pieces)}"
                )

        if estimate is not None:
            lines.extend(self._format_estimate(estimate))

        return "\n".join(lines)

    def _format_estimate(self, estimate: CostEstimate) -> list[str]:
        lines = ["", "ESTIMATED COST", "-" * 70]
        for item in estimate.itemized:
            lines.append(
                f"  {_stock_label(item.thickness, item.species):<30} "
                f"{item.board_feet:>7.2f} bd ft @ ${item.price_per_board_foot:.2f}"
                f" = ${item.cost:.2f}"
            )
        lines.append(f"  Total: ${estimate.total_cost:.2f}")
        for missing in estimate.missing_prices:
            lines.append(
                f"  No price for {_stock_label(missing.thickness, missing.species)}"
            )
        lines.append("  (Prices are estimates; confirm with your supplier.)")
        return lines


def _piece_to_dict(piece: PieceInstance) -> dict[str, Any]:
    return {
        "id": piece.unique_id,
        "original_id": piece.original_id,
        "name": piece.name,
        "length": piece.length,
        "width": piece.width,
        "thickness": piece.thickness,
        "species": piece.species,
    }


def _placement_to_dict(placement: Placement) -> dict[str, Any]:
    return {
        "piece": _piece_to_dict(placement.piece),
        "x": placement.x,
        "y": placement.y,
        "placed_length": placement.placed_length,
        "placed_width": placement.placed_width,
        "rotated": placement.rotated,
    }


def _board_to_dict(board: Board) -> dict[str, Any]:
    return {
        "id": board.id,
        "name": board.name,
        "length": board.length,
        "width": board.width,
        "thickness": board.thickness,
        "species": board.species,
        "quantity": board.quantity,
        "board_feet": board.total_board_feet,
    }


def plan_to_dict(plan: CutPlan) -> dict[str, Any]:
    """Convert a cut plan to JSON-serializable data."""
    return {
        "assignments": [
            {
                "board": {
                    "id": a.board.unique_id,
                    "original_id": a.board.original_id,
                    "name": a.board.name,
                    "length": a.board.length,
                    "width": a.board.width,
                    "thickness": a.board.thickness,
                    "species": a.board.species,
                },
                "placements": [_placement_to_dict(p) for p in a.placements],
                "strips": [
                    {
                        "y": s.y,
                        "width": s.width,
                        "length": s.length,
                        "piece_ids": [p.piece.unique_id for p in s.placements],
                    }
                    for s in a.strips
                ],
                "board_area": a.board_area,
                "cuts_area": a.cuts_area,
            }
            for a in plan.assignments
        ],
        "efficiency": plan.efficiency,
        "waste": plan.waste,
        "unplaced_pieces": [_piece_to_dict(p) for p in plan.unplaced_pieces],
        "warnings": list(plan.warnings),
        "boards_used": plan.boards_used,
        "total_stock_boards": plan.total_stock_boards,
    }


def cost_estimate_to_dict(estimate: CostEstimate) -> dict[str, Any]:
    return {
        "total_cost": estimate.total_cost,
        "itemized": [
            {
                "species": item.species,
                "thickness": item.thickness,
                "board_feet": item.board_feet,
                "price_per_board_foot": item.price_per_board_foot,
                "cost": item.cost,
            }
            for item in estimate.itemized
        ],
        "missing_prices": [
            {"species": m.species, "thickness": m.thickness}
            for m in estimate.missing_prices
        ],
    }


def stock_result_to_dict(
    result: StockResult,
    estimate: CostEstimate | None = None,
) -> dict[str, Any]:
    """Convert a stock result (and optional estimate) to JSON-serializable data."""
    data: dict[str, Any] = {
        "boards_needed": result.boards_needed,
        "boards": [_board_to_dict(b) for b in result.boards],
        "boards_by_template": [
            {
                "name": tc.template.name,
                "length": tc.template.length,
                "width": tc.template.width,
                "thickness": tc.template.thickness,
                "species": tc.template.species,
                "count": tc.count,
            }
            for tc in result.boards_by_template
        ],
        "total_board_feet": result.total_board_feet,
        "cut_plan": plan_to_dict(result.cut_plan) if result.cut_plan else None,
    }
    if estimate is not None:
        data["cost_estimate"] = cost_estimate_to_dict(estimate)
    return data
