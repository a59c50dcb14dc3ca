"""Price lookup command."""

from typing import Annotated

import typer

from cutplan.infrastructure import get_price_per_board_foot, get_sheet_price


def price_command(
    species: Annotated[
        str,
        typer.Argument(help="Wood species, or a sheet product with --sheet"),
    ],
    thickness: Annotated[
        str,
        typer.Argument(help="Thickness notation, e.g. 4/4 or 3/4"),
    ],
    sheet: Annotated[
        bool,
        typer.Option("--sheet", help="Look up a per-sheet price for sheet goods"),
    ] = False,
) -> None:
    """Look up an estimated lumber price.

    Example:
        cutplan price Walnut 8/4
        cutplan price "Baltic Birch 4x8" 3/4 --sheet
    """
    if sheet:
        price = get_sheet_price(species, thickness)
        unit = "sheet"
    else:
        price = get_price_per_board_foot(species, thickness)
        unit = "bd ft"

    if price is None:
        typer.echo(f"No price found for {species} {thickness}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"{species} {thickness}: ${price:.2f} per {unit}")
