"""
renderer/grid.py — Tile grid layout and hit detection for Chroma Vision.

TileGrid lays out the 5x5 board and maps screen points to tile indices.
It owns no game state: render() takes the colors to draw, and the view
forwards hit_test() results to Game.click().

Tiles are numbered row-major, so index = row * cols + col, matching the
order of Level.colors.

The grid is centered horizontally within the 360px game width, and
vertically between the header and the footer.
"""

import pygame
from settings import (
    SCREEN_W, SCREEN_H,
    GRID_SIZE, GRID_TILE, GRID_PADDING, TILE_RADIUS,
    HEADER_H, TIMER_BAR_H, FOOTER_H,
)
from utils.color import HSLColor, darker


class TileGrid:
    """A clickable square grid of tiles centered in the game viewport.

    Attributes:
        size:      Tiles per row and per column.
        tile:      Tile edge length in pixels.
        padding:   Gap between tiles in pixels.
        origin_x:  X pixel of the grid's top-left tile.
        origin_y:  Y pixel of the grid's top-left tile.
    """

    def __init__(
        self,
        size: int = GRID_SIZE,
        tile: int = GRID_TILE,
        padding: int = GRID_PADDING,
    ) -> None:
        self.size = size
        self.tile = tile
        self.padding = padding
        self._compute_origin()

    def _compute_origin(self) -> None:
        top_used = HEADER_H + TIMER_BAR_H
        usable_h = SCREEN_H - top_used - FOOTER_H
        span = self.size * self.tile + (self.size - 1) * self.padding

        self.origin_x = (SCREEN_W - span) // 2
        self.origin_y = top_used + (usable_h - span) // 2

    @property
    def cells(self) -> int:
        return self.size * self.size

    def tile_rect(self, index: int) -> pygame.Rect:
        """Return the pygame.Rect of the tile at a row-major index."""
        row, col = divmod(index, self.size)
        x = self.origin_x + col * (self.tile + self.padding)
        y = self.origin_y + row * (self.tile + self.padding)
        return pygame.Rect(x, y, self.tile, self.tile)

    def hit_test(self, gx: int, gy: int) -> int | None:
        """Return the index of the tile under a game coordinate, or None.

        Points in the padding between tiles or outside the board miss.

        Args:
            gx: X coordinate in native game space.
            gy: Y coordinate in native game space.
        """
        for index in range(self.cells):
            if self.tile_rect(index).collidepoint(gx, gy):
                return index
        return None

    def render(
        self,
        surface: pygame.Surface,
        colors: tuple[HSLColor, ...],
        hovered: int | None = None,
    ) -> None:
        """Draw one rounded tile per color.

        The hovered tile gets a slightly darker outline only; its fill is
        never altered, or it would give the answer away.

        Args:
            surface: pygame Surface in native 360x640 resolution.
            colors:  Row-major tile colors. Nothing is drawn if empty.
            hovered: Index under the cursor, or None.
        """
        for index, color in enumerate(colors[:self.cells]):
            rect = self.tile_rect(index)
            rgb = color.to_rgb()
            pygame.draw.rect(surface, rgb, rect, border_radius=TILE_RADIUS)
            if index == hovered:
                pygame.draw.rect(surface, darker(rgb, 60), rect, 2,
                                 border_radius=TILE_RADIUS)
