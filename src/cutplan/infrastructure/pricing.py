"""Lumber price lookup and cost estimation.

Prices are estimates taken from a retail hardwood supplier's in-store
price list and are subject to change. Hardwood is priced per board foot,
keyed by species and thickness notation; sheet goods are priced per sheet.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Sequence

from cutplan.domain.value_objects import Board

logger = logging.getLogger(__name__)

DOMESTIC = "Domestic"
EXOTIC = "Exotic"


@dataclass(frozen=True)
class SpeciesPricing:
    """Board-foot prices for one species.

    Attributes:
        category: Domestic or Exotic.
        grade: Supplier grade description.
        prices: Price per board foot keyed by thickness notation.
    """

    category: str
    grade: str
    prices: dict[str, float] = field(default_factory=dict)

    @property
    def thicknesses(self) -> list[str]:
        return list(self.prices)


@dataclass(frozen=True)
class SheetPricing:
    """Per-sheet prices for one sheet-goods product."""

    grade: str | None
    prices: dict[str, float] = field(default_factory=dict)


LUMBER_PRICES: dict[str, SpeciesPricing] = {
    # Domestic hardwoods
    "Alder - Knotty": SpeciesPricing(DOMESTIC, "Premium Knotty", {"4/4": 4.95}),
    "Ash - White": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 4.95, "8/4": 5.95}),
    "Basswood": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 3.95, "8/4": 4.95}),
    "Beech": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 4.95}),
    "Birch - Yellow": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 5.45}),
    "Butternut": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 12.95}),
    "Catalpa": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 4.95}),
    "Cedar - Aromatic": SpeciesPricing(DOMESTIC, "#1 Com & Better", {"4/4": 5.95}),
    "Cedar - Western Red": SpeciesPricing(DOMESTIC, "Select Tight Knot", {"4/4": 7.95}),
    "Cherry": SpeciesPricing(
        DOMESTIC, "FAS/F1F/S&B", {"4/4": 5.95, "6/4": 6.45, "8/4": 6.95}
    ),
    "Cherry - Select": SpeciesPricing(DOMESTIC, "Select 90/70", {"4/4": 4.45}),
    "Douglas Fir": SpeciesPricing(DOMESTIC, "Clear Vertical Grain", {"4/4": 14.95}),
    "Hickory - Calico": SpeciesPricing(
        DOMESTIC, "Select & Better", {"4/4": 5.95, "8/4": 6.95}
    ),
    "Hickory - Heart": SpeciesPricing(
        DOMESTIC, "Select & Better 90/70", {"4/4": 6.45, "6/4": 6.45}
    ),
    "Maple - Ambrosia": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 7.95}),
    "Maple - Birds Eye": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 9.95}),
    "Maple - Curly": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 8.95}),
    "Maple - Hard": SpeciesPricing(
        DOMESTIC,
        "Select & Better",
        {"4/4": 5.95, "6/4": 5.95, "8/4": 6.95, "10/4": 7.95},
    ),
    "Maple - Soft": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 4.95}),
    "Oak - Red": SpeciesPricing(DOMESTIC, "FAS/S&B", {"4/4": 4.95, "8/4": 5.95}),
    "Oak - Red QS": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 6.95}),
    "Oak - Red Rift": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 6.95}),
    "Oak - White": SpeciesPricing(
        DOMESTIC, "Select & Better", {"4/4": 10.95, "6/4": 11.95, "8/4": 14.95}
    ),
    "Oak - White QS": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 12.95}),
    "Oak - White Rift": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 16.95}),
    "Poplar": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 3.95, "8/4": 4.45}),
    "Sycamore - QS": SpeciesPricing(DOMESTIC, "Select & Better", {"5/4": 7.95}),
    "Walnut - Natural": SpeciesPricing(DOMESTIC, "Select & Better", {"4/4": 9.95}),
    "Walnut": SpeciesPricing(
        DOMESTIC, "Select & Better", {"4/4": 10.95, "6/4": 13.45, "8/4": 15.95}
    ),
    "Walnut - Prime": SpeciesPricing(
        DOMESTIC, "F1F & Better - Prime", {"4/4": 12.95, "6/4": 15.95}
    ),
    # Exotic hardwoods
    "Beli": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 14.95}),
    "Black Limba": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 11.95, "8/4": 13.95}),
    "Bloodwood": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 10.95}),
    "Canarywood": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 14.95}),
    "Ebiara": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 9.95}),
    "Iroko": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 12.95, "8/4": 13.95}),
    "Jatoba": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 11.95}),
    "Leopardwood": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 18.95}),
    "Mahogany - African": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 9.95, "8/4": 10.95}),
    "Olivewood": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 23.95, "8/4": 24.95}),
    "Osage Orange": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 15.95}),
    "Padauk": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 10.95}),
    "Peruvian Walnut": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 11.95}),
    "Purple Heart": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 13.95}),
    "Sapele - QS": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 9.95, "8/4": 12.95}),
    "Spanish Cedar": SpeciesPricing(EXOTIC, "FEQ", {"8/4": 9.95}),
    "Wenge": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 22.95}),
    "Wenge - Shorts": SpeciesPricing(EXOTIC, "FEQ", {"4/4": 17.95}),
}

SHEET_GOODS_PRICES: dict[str, SheetPricing] = {
    "Baltic Birch 5x5": SheetPricing(
        "B/BB",
        {"1/2": 39.95, "5/8": 54.95, "3/4": 69.95, "7/8": 89.95, "1": 114.95},
    ),
    "Baltic Birch 4x8": SheetPricing(
        "BB/BB", {"1/2": 69.95, "3/4": 108.95, "7/8": 119.95, "1": 129.95}
    ),
    "Bending Ply 4x8": SheetPricing("Column Bend", {"1/2": 69.95}),
    "Birch SpartanPly 4x8": SheetPricing("B2", {"3/4": 99.95}),
    "Hex Plywood 4x8": SheetPricing(None, {"3/4": 149.95}),
    "Pre-Finished Birch 4x8": SheetPricing(
        "C2, PR FIN", {"1/2": 43.95, "3/4": 74.95, "1": 84.95}
    ),
    "Pre-Finished Maple 4x8": SheetPricing("C2, PR FIN", {"1/2": 69.95, "1": 129.95}),
    "Maple 4x8": SheetPricing("B4/A1/B1", {"1/4": 69.95, "1/2": 145.95, "3/4": 119.95}),
    "Red Oak 4x8": SheetPricing("A1/A4", {"1/4": 91.95, "3/4": 159.95}),
    "Walnut 4x8 - A1": SheetPricing("A1", {"1/4": 164.95, "3/4": 239.95}),
    "Walnut 4x8 - B4": SheetPricing("B4", {"1/4": 114.95}),
    "White Oak Rift 4x8": SheetPricing("A1", {"3/4": 249.95}),
    "White Oak 4x8": SheetPricing("A1/A4", {"1/4": 139.95, "3/4": 229.95}),
    "Cherry 4x8 - A1": SheetPricing(
        "A1", {"1/4": 144.95, "1/2": 169.95, "3/4": 189.95}
    ),
    "Cherry 4x8 - A4": SheetPricing("A4", {"1/4": 129.95}),
    "MDF 4x8": SheetPricing("Ultra-Light", {"1/2": 34.95, "3/4": 49.95, "1": 69.95}),
}

_QUARTERS_PATTERN = re.compile(r"^(\d+)/4$")


def _quarters(thickness: str) -> int | None:
    """Thickness in quarter inches for "n/4" notation, else None."""
    match = _QUARTERS_PATTERN.match(thickness)
    return int(match.group(1)) if match else None


def _nearest_thickness_price(pricing: SpeciesPricing, thickness: str) -> float | None:
    requested = _quarters(thickness)
    if requested is None:
        return None

    closest: str | None = None
    closest_diff: int | None = None
    for candidate in pricing.prices:
        quarters = _quarters(candidate)
        if quarters is None:
            continue
        diff = abs(quarters - requested)
        if closest_diff is None or diff < closest_diff:
            closest, closest_diff = candidate, diff

    return pricing.prices[closest] if closest is not None else None


def get_price_per_board_foot(species: str | None, thickness: str) -> float | None:
    """Look up the price per board foot for a species and thickness.

    Lookup order:
        1. Exact species name with the exact thickness.
        2. First species whose name contains, or is contained in, the
           requested name (case-insensitive) and lists the thickness.
        3. The exact species at its nearest quarter-inch thickness.

    Args:
        species: Wood species name. None never matches.
        thickness: Thickness notation, e.g. "4/4".

    Returns:
        Price per board foot, or None when no price is known.

    Examples:
        >>> get_price_per_board_foot("Walnut", "8/4")
        15.95
        >>> get_price_per_board_foot("Walnut", "12/4")
        15.95
    """
    if not species:
        return None

    exact = LUMBER_PRICES.get(species)
    if exact is not None and thickness in exact.prices:
        return exact.prices[thickness]

    wanted = species.lower()
    for name, pricing in LUMBER_PRICES.items():
        candidate = name.lower()
        if (wanted in candidate or candidate in wanted) and thickness in pricing.prices:
            logger.debug("Priced '%s' %s using '%s'", species, thickness, name)
            return pricing.prices[thickness]

    if exact is not None:
        return _nearest_thickness_price(exact, thickness)

    return None


def get_sheet_price(product: str, thickness: str) -> float | None:
    """Price of one sheet of a sheet-goods product, or None if unlisted."""
    pricing = SHEET_GOODS_PRICES.get(product)
    if pricing is None:
        return None
    return pricing.prices.get(thickness)


def available_species() -> list[tuple[str, SpeciesPricing]]:
    """Species with prices, domestic before exotic, then by name."""
    return sorted(
        LUMBER_PRICES.items(),
        key=lambda item: (item[1].category != DOMESTIC, item[0].lower()),
    )


@dataclass(frozen=True)
class BoardCost:
    """Cost of a quantity of lumber at one species and thickness.

    ``cost`` and ``price_per_board_foot`` are None when no price is known.
    """

    species: str | None
    thickness: str
    board_feet: float
    price_per_board_foot: float | None
    cost: float | None

    @property
    def found(self) -> bool:
        return self.price_per_board_foot is not None


@dataclass(frozen=True)
class MissingPrice:
    species: str | None
    thickness: str


@dataclass(frozen=True)
class CostEstimate:
    """Total cost of a set of boards.

    Attributes:
        total_cost: Sum of every priced item.
        itemized: Priced items, in input order.
        missing_prices: Species/thickness pairs without a price.
    """

    total_cost: float
    itemized: tuple[BoardCost, ...]
    missing_prices: tuple[MissingPrice, ...]

    @property
    def is_complete(self) -> bool:
        return not self.missing_prices


def calculate_board_cost(
    board_feet: float,
    species: str | None,
    thickness: str,
) -> BoardCost:
    """Price ``board_feet`` of the given species and thickness."""
    price = get_price_per_board_foot(species, thickness)
    return BoardCost(
        species=species,
        thickness=thickness,
        board_feet=board_feet,
        price_per_board_foot=price,
        cost=board_feet * price if price is not None else None,
    )


def estimate_cost(boards: Sequence[Board]) -> CostEstimate:
    """Estimate the purchase cost of stock boards, quantities included."""
    total = 0.0
    itemized: list[BoardCost] = []
    missing: list[MissingPrice] = []

    for board in boards:
        item = calculate_board_cost(board.total_board_feet, board.species, board.thickness)
        if item.cost is not None:
            total += item.cost
            itemized.append(item)
        else:
            missing.append(MissingPrice(board.species, board.thickness))

    if missing:
        logger.info("No price for %d of %d boards", len(missing), len(boards))

    return CostEstimate(
        total_cost=total,
        itemized=tuple(itemized),
        missing_prices=tuple(missing),
    )
