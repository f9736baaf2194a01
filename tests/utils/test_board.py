import pytest
from pyrsistent import pvector

from couple_ludo.board import (
    BOARD_FN_REGISTRY,
    build_path,
    create_board,
    serpentine_coordinates,
    spiral_coordinates,
    validate_board,
)
from couple_ludo.components import Cell
from couple_ludo.config import GameConfig
from couple_ludo.types import CellType


def assert_connected(coords) -> None:
    for (x1, y1), (x2, y2) in zip(coords, coords[1:]):
        assert abs(x1 - x2) + abs(y1 - y2) == 1


def test_serpentine_coordinates() -> None:
    coords = serpentine_coordinates(7)
    assert len(coords) == 31
    assert len(set(coords)) == 31
    assert coords[0] == (0, 0)
    assert_connected(coords)


def test_spiral_coordinates() -> None:
    coords = spiral_coordinates(7)
    assert len(coords) == 49
    assert len(set(coords)) == 49
    assert_connected(coords)


@pytest.mark.parametrize("name", sorted(BOARD_FN_REGISTRY))
def test_registered_boards_are_valid(name: str) -> None:
    config = GameConfig(board_fn_name=name)
    cells = create_board(config, seed=3)
    validate_board(cells)
    types = [c.type for c in cells]
    assert types.count(CellType.STAR) == config.star_count
    assert types.count(CellType.TRAP) == config.trap_count
    last = len(cells) - 1
    for index in (1, last - 1):
        assert cells[index].type == CellType.PATH


def test_board_is_deterministic_per_seed() -> None:
    config = GameConfig()
    assert create_board(config, seed=8) == create_board(config, seed=8)


def test_build_path_caps_specials_on_short_boards() -> None:
    cells = build_path([(i, 0) for i in range(5)], star_count=5, trap_count=5, seed=0)
    assert [c.type for c in cells] == [
        CellType.START,
        CellType.PATH,
        cells[2].type,
        CellType.PATH,
        CellType.END,
    ]
    assert cells[2].type in (CellType.STAR, CellType.TRAP)


def test_unknown_generator() -> None:
    with pytest.raises(ValueError):
        create_board(GameConfig(board_fn_name="hexagon"))


@pytest.mark.parametrize(
    "cells",
    [
        pvector([Cell(0, 0, 0, CellType.START)]),
        pvector([Cell(0, 0, 0, CellType.START), Cell(2, 1, 0, CellType.END)]),
        pvector([Cell(0, 0, 0, CellType.PATH), Cell(1, 1, 0, CellType.END)]),
        pvector([Cell(0, 0, 0, CellType.START), Cell(1, 1, 0, CellType.PATH)]),
    ],
)
def test_validate_board_rejects(cells) -> None:
    with pytest.raises(ValueError):
        validate_board(cells)
