"""
renderer/view.py — pygame front end for the Chroma Vision engine.

GameView is the render surface and presentation layer in one:
    - Mouse clicks on a tile become Game.click(index)
    - Clicks on START / TRY AGAIN become Game.start()
    - Each frame it reads Game.snapshot() and draws it
    - A milestone event starts a short screen flash

The view never changes engine state directly. The only feedback it keeps
locally is purely visual (hover, flash timer, button rect).
"""

from __future__ import annotations
import pygame

from core.game import Game, GameEvent
from core.session import GameSnapshot, SessionState
from core.timer import fill
from renderer import ui
from renderer.grid import TileGrid
from settings import COLOR, INITIAL_TIME, MILESTONE_FLASH_S


class GameView:
    """Routes pygame input to a Game and draws its snapshots.

    Attributes:
        game:         The engine being displayed.
        grid:         Tile layout and hit testing.
        _btn_rect:    Rect of the start / retry button from the last render.
        _hover_tile:  Tile index under the cursor, or None.
        _hover_btn:   True if the cursor is over the button.
        _flash_timer: Seconds left in the milestone flash.
    """

    def __init__(self, game: Game) -> None:
        self.game = game
        self.grid = TileGrid()
        self._btn_rect: pygame.Rect | None = None
        self._hover_tile: int | None = None
        self._hover_btn: bool = False
        self._flash_timer: float = 0.0
        game.set_listener(self._on_game_event)

    def _on_game_event(self, event: GameEvent, snapshot: GameSnapshot) -> None:
        if event is GameEvent.MILESTONE:
            self._flash_timer = MILESTONE_FLASH_S
        elif event in (GameEvent.STARTED, GameEvent.GAME_OVER):
            self._flash_timer = 0.0

    # ── Input ─────────────────────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> None:
        """Handle one pygame event. Positions are in game coordinates."""
        if event.type == pygame.MOUSEMOTION:
            self._update_hover(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.game.state is SessionState.ACTIVE:
                index = self.grid.hit_test(*event.pos)
                if index is not None:
                    self.game.click(index)
            elif self._btn_rect and self._btn_rect.collidepoint(event.pos):
                self.game.start()
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_SPACE):
            if self.game.state is not SessionState.ACTIVE:
                self.game.start()

    def _update_hover(self, pos: tuple[int, int]) -> None:
        if self.game.state is SessionState.ACTIVE:
            self._hover_tile = self.grid.hit_test(*pos)
            self._hover_btn = False
        else:
            self._hover_tile = None
            self._hover_btn = bool(self._btn_rect and self._btn_rect.collidepoint(pos))

    def update(self, dt: float) -> None:
        """Advance visual-only timers."""
        if self._flash_timer > 0.0:
            self._flash_timer = max(0.0, self._flash_timer - dt)

    # ── Rendering ─────────────────────────────────────────────────────────────

    def render(self, surface: pygame.Surface) -> None:
        """Draw the current snapshot onto the native game surface."""
        snap = self.game.snapshot()
        surface.fill(COLOR["background"])

        ui.draw_header(surface, snap.score, snap.time_remaining)
        ui.draw_timer_bar(surface, fill(snap.time_remaining, INITIAL_TIME), snap.time_remaining)

        if snap.state is SessionState.IDLE:
            self._btn_rect = ui.draw_start(surface, self._hover_btn)
        elif snap.state is SessionState.OVER:
            self._btn_rect = ui.draw_game_over(surface, snap.score, snap.grade, self._hover_btn)
        else:
            self._btn_rect = None
            self.grid.render(surface, snap.grid, self._hover_tile)
            ui.draw_footer(surface, snap.current_delta)
            if self._flash_timer > 0.0:
                ui.draw_flash(surface, COLOR["milestone"], self._flash_timer / MILESTONE_FLASH_S)
