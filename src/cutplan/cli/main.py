"""Typer CLI for cut planning and stock sizing."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from cutplan.application import CutPlanningService, StockSizingService
from cutplan.application.config import (
    config_to_boards,
    config_to_pieces,
    config_to_templates,
)
from cutplan.cli.commands import (
    load_project_or_exit,
    price_command,
    validate_command,
)
from cutplan.infrastructure import (
    CutPlanFormatter,
    StockReportFormatter,
    estimate_cost,
    plan_to_dict,
    stock_result_to_dict,
)

# Exit code when a plan leaves pieces without a board.
EXIT_UNPLACED = 2


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


app = typer.Typer(
    name="cutplan",
    help="Plan cuts onto lumber and size the stock to buy.",
)

app.command(name="validate")(validate_command)
app.command(name="price")(price_command)


@app.command()
def optimize(
    project_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    kerf: Annotated[
        float | None,
        typer.Option("--kerf", "-k", min=0.0, max=0.5, help="Saw kerf in inches (overrides project)"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the plan as JSON"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Assign the project's pieces onto its stock boards.

    Exits with code 2 when some pieces could not be placed.

    Example:
        cutplan optimize bookshelf.json --kerf 0.125
    """
    _configure_logging(verbose)
    config = load_project_or_exit(project_file)

    service = CutPlanningService(kerf=kerf if kerf is not None else config.kerf)
    plan = service.optimize(config_to_boards(config), config_to_pieces(config))

    if as_json:
        typer.echo(json.dumps(plan_to_dict(plan), indent=2))
    else:
        typer.echo(CutPlanFormatter().format(plan))

    if not plan.is_complete:
        raise typer.Exit(code=EXIT_UNPLACED)


@app.command()
def stock(
    project_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file"),
    ],
    kerf: Annotated[
        float | None,
        typer.Option("--kerf", "-k", min=0.0, max=0.5, help="Saw kerf in inches (overrides project)"),
    ] = None,
    prices: Annotated[
        bool,
        typer.Option("--prices", "-p", help="Include an estimated cost"),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the result as JSON"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Work out how many boards of the project's templates to buy.

    Example:
        cutplan stock bookshelf.json --prices
    """
    _configure_logging(verbose)
    config = load_project_or_exit(project_file)

    templates = config_to_templates(config)
    if not templates:
        typer.echo("Error: project defines no board templates to buy.", err=True)
        raise typer.Exit(code=1)

    service = StockSizingService(kerf=kerf if kerf is not None else config.kerf)
    result = service.calculate(config_to_pieces(config), templates)
    estimate = estimate_cost(result.boards) if prices else None

    if as_json:
        typer.echo(json.dumps(stock_result_to_dict(result, estimate), indent=2))
    else:
        typer.echo(StockReportFormatter().format(result, estimate))


if __name__ == "__main__":
    app()
