"""
main.py — Entry point and game loop for Chroma Vision.

Responsibilities:
    - Configure logging from settings.py
    - Initialise pygame and create the window
    - Run the main loop: handle events → update → render → flip
    - Manage pygame.Clock and delta time; the clamped frame time is the
      clock source for the engine's tick driver
    - Wrap the loop in async for pygbag (WASM export)

Architecture note:
    main.py is intentionally thin. It owns pygame lifecycle and the
    window — nothing else. Game rules live in core/, drawing and input
    routing in renderer/view.py.

Scaling:
    The window uses pygame.SCALED, so pygame letterboxes the native
    360x640 surface and delivers mouse positions in game coordinates.

Usage (local):
    python main.py

Usage (WASM export):
    pygbag main.py
"""

import asyncio
import logging
import pygame
from settings import SCREEN_W, SCREEN_H, FPS, TITLE, LOG_LEVEL, LOG_FORMAT
from core.game import Game
from renderer.view import GameView

logger = logging.getLogger(__name__)


async def main() -> None:
    """Async main loop — compatible with both CPython and pygbag WASM.

    Each iteration yields to the event loop via asyncio.sleep(0), which
    pygbag uses to hand control back to the browser.
    """
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    pygame.init()

    window = pygame.display.set_mode(
        (SCREEN_W, SCREEN_H),
        pygame.SCALED | pygame.RESIZABLE,
    )
    pygame.display.set_caption(TITLE)

    clock = pygame.time.Clock()
    game  = Game()
    view  = GameView(game)
    logger.info("window ready: %dx%d", SCREEN_W, SCREEN_H)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        dt = min(dt, 0.05)              # clamp to 50ms

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            else:
                view.handle_event(event)

        game.update(dt)
        view.update(dt)

        view.render(window)
        pygame.display.flip()

        await asyncio.sleep(0)

    pygame.quit()


if __name__ == "__main__":
    asyncio.run(main())
