"""
settings.py — Global constants for Chroma Vision.

All magic numbers live here. No other module should hardcode colors,
dimensions, or timing values. Import what you need with:
    from settings import COLOR, GRID_CELLS, ...
"""

import logging

# ── Screen ────────────────────────────────────────────────────────────────────
SCREEN_W = 360
SCREEN_H = 640
FPS = 60
TITLE = "Chroma Vision"

# ── Colors ────────────────────────────────────────────────────────────────────
COLOR = {
    "background":  (253, 252, 251),   # #FDFCFB
    "panel":       (255, 255, 255),   # #FFFFFF
    "panel_edge":  (230, 229, 228),   # hairline borders
    "text":        ( 26,  26,  26),   # #1A1A1A
    "text_muted":  (140, 140, 140),   # labels
    "text_light":  (255, 255, 255),   # white text on dark buttons
    "button":      ( 26,  26,  26),   # black primary button
    "button_hover":( 60,  60,  60),
    "timer":       ( 16, 185, 129),   # #10B981
    "timer_low":   (239,  68,  68),   # #EF4444 — under TIMER_WARN_S
    "milestone":   ( 59, 130, 246),   # #3B82F6 — celebration flash
}

# ── Grid ──────────────────────────────────────────────────────────────────────
GRID_SIZE     = 5
GRID_CELLS    = GRID_SIZE * GRID_SIZE
GRID_TILE     = 56    # px, square tiles
GRID_PADDING  = 6     # gap between tiles
TILE_RADIUS   = 8     # rounded corners

# ── Base color ranges (HSL) ───────────────────────────────────────────────────
# Half-open integer ranges, fed to rng.randrange()
HUE_RANGE        = (0, 360)
SATURATION_RANGE = (40, 80)
LIGHTNESS_RANGE  = (30, 70)

# ── Timer ─────────────────────────────────────────────────────────────────────
INITIAL_TIME    = 60     # seconds per session
TICK_INTERVAL_S = 1.0    # one tick per second while active
MISS_PENALTY_S  = 3      # flat, regardless of difficulty
TIMER_WARN_S    = 10     # timer turns red below this

# ── Difficulty ────────────────────────────────────────────────────────────────
# delta = max(MIN_DELTA, INITIAL_DELTA - DELTA_LOG_SCALE * log2(score + 1))
INITIAL_DELTA   = 20.0   # lightness percent at score 0
MIN_DELTA       = 1.5    # floor — near-imperceptible
DELTA_LOG_SCALE = 3.5

# ── Scoring ───────────────────────────────────────────────────────────────────
MILESTONE_EVERY = 10
# Checked top-down: score strictly greater than the threshold earns the grade
GRADE_THRESHOLDS = (
    ("S", 40),
    ("A", 30),
    ("B", 20),
)
GRADE_FLOOR = "C"

# ── UI Layout (relative to 360×640) ──────────────────────────────────────────
HEADER_H       = 96    # px — title, score and time
TIMER_BAR_H    = 6     # px — thin bar below header
FOOTER_H       = 72    # px — delta readout
BUTTON_H       = 48
MILESTONE_FLASH_S = 0.6

# ── Fonts ─────────────────────────────────────────────────────────────────────
FONT_FAMILY  = "dejavusansmono"
FONT_SIZE_XL = 36
FONT_SIZE_LG = 18
FONT_SIZE_MD = 14
FONT_SIZE_SM = 11

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL  = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
