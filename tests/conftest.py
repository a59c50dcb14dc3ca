"""Pytest configuration and shared fixtures for cut planning tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from cutplan.domain import Board, BoardTemplate, GrainDirection, Piece


FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared factories for domain records
# =============================================================================


@pytest.fixture
def make_piece() -> Callable[..., Piece]:
    """Factory for pieces; defaults to a single 4/4 piece with no species."""

    def _make(
        length: float,
        width: float,
        thickness: str = "4/4",
        species: str | None = None,
        quantity: int = 1,
        grain_direction: GrainDirection = GrainDirection.ANY,
        id: str = "p",
        name: str = "Piece",
    ) -> Piece:
        return Piece(
            id=id,
            name=name,
            length=length,
            width=width,
            thickness=thickness,
            species=species,
            quantity=quantity,
            grain_direction=grain_direction,
        )

    return _make


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Factory for stock boards; defaults to a single 4/4 board."""

    def _make(
        length: float,
        width: float,
        thickness: str = "4/4",
        species: str | None = None,
        quantity: int = 1,
        id: str = "b",
        name: str = "Board",
    ) -> Board:
        return Board(
            id=id,
            name=name,
            length=length,
            width=width,
            thickness=thickness,
            species=species,
            quantity=quantity,
        )

    return _make


@pytest.fixture
def make_template() -> Callable[..., BoardTemplate]:
    """Factory for purchasable board templates."""

    def _make(
        length: float,
        width: float,
        thickness: str = "4/4",
        species: str | None = None,
        name: str = "Board",
    ) -> BoardTemplate:
        return BoardTemplate(
            name=name,
            length=length,
            width=width,
            thickness=thickness,
            species=species,
        )

    return _make


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding JSON project fixtures."""
    return FIXTURES_PATH
