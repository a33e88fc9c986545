"""Tests for renderer/grid.py — layout and hit detection (no display needed)."""

import pytest

from renderer.grid import TileGrid
from settings import GRID_CELLS, GRID_PADDING, GRID_SIZE, GRID_TILE, SCREEN_W


@pytest.fixture
def grid() -> TileGrid:
    return TileGrid()


def test_cell_count(grid):
    assert grid.cells == GRID_CELLS == 25


def test_centered_horizontally(grid):
    span = GRID_SIZE * GRID_TILE + (GRID_SIZE - 1) * GRID_PADDING
    assert grid.origin_x == (SCREEN_W - span) // 2


def test_row_major_layout(grid):
    first = grid.tile_rect(0)
    assert grid.tile_rect(1).x == first.x + GRID_TILE + GRID_PADDING
    assert grid.tile_rect(GRID_SIZE).y == first.y + GRID_TILE + GRID_PADDING
    assert grid.tile_rect(GRID_SIZE).x == first.x


@pytest.mark.parametrize("index", range(GRID_CELLS))
def test_hit_test_tile_centers(grid, index):
    assert grid.hit_test(*grid.tile_rect(index).center) == index


def test_hit_test_padding_gap(grid):
    rect = grid.tile_rect(0)
    assert grid.hit_test(rect.right + GRID_PADDING // 2, rect.centery) is None


def test_hit_test_outside_board(grid):
    assert grid.hit_test(0, 0) is None
    assert grid.hit_test(grid.origin_x - 1, grid.origin_y) is None
