"""
renderer/ui.py — UI chrome rendering for Chroma Vision.

Draws everything except the tile grid:
    - Header (title, score, time left)
    - Timer bar below the header
    - Footer with the current lightness delta
    - Start screen and game over screen, each with one button
    - Milestone flash overlay

All functions are stateless — they take explicit data arguments and draw
to the provided surface. Buttons return their rect so the view can hit
test clicks against it.
"""

import pygame
from settings import (
    SCREEN_W, SCREEN_H,
    HEADER_H, TIMER_BAR_H, FOOTER_H, BUTTON_H,
    TIMER_WARN_S,
    COLOR,
    FONT_FAMILY, FONT_SIZE_XL, FONT_SIZE_LG, FONT_SIZE_MD, FONT_SIZE_SM,
)
from utils.color import RGBColor, lerp_color


# ── Font cache ────────────────────────────────────────────────────────────────
_fonts: dict[tuple[int, bool], pygame.font.Font] = {}


def _font(size: int, bold: bool = False) -> pygame.font.Font:
    key = (size, bold)
    if key not in _fonts:
        _fonts[key] = pygame.font.SysFont(FONT_FAMILY, size, bold=bold)
    return _fonts[key]


def _blit_centered(surface: pygame.Surface, text: pygame.Surface, y: int) -> None:
    surface.blit(text, ((SCREEN_W - text.get_width()) // 2, y))


# ── Header ────────────────────────────────────────────────────────────────────

def draw_header(surface: pygame.Surface, score: int, time_remaining: int) -> None:
    """Draw the title on the left and score/time on the right.

    Time turns red below TIMER_WARN_S seconds.
    """
    pygame.draw.rect(surface, COLOR["panel"], (0, 0, SCREEN_W, HEADER_H))
    pygame.draw.line(surface, COLOR["panel_edge"], (0, HEADER_H - 1), (SCREEN_W, HEADER_H - 1))

    title = _font(FONT_SIZE_LG, bold=True).render("CHROMA VISION", True, COLOR["text"])
    subtitle = _font(FONT_SIZE_SM).render("FIND THE ODD TILE", True, COLOR["text_muted"])
    surface.blit(title, (16, 28))
    surface.blit(subtitle, (16, 54))

    label_font = _font(FONT_SIZE_SM)
    value_font = _font(FONT_SIZE_LG)
    time_color = COLOR["timer_low"] if time_remaining < TIMER_WARN_S else COLOR["text"]

    for x_right, label, value, color in (
        (SCREEN_W - 16, "TIME", f"{time_remaining}s", time_color),
        (SCREEN_W - 84, "SCORE", str(score), COLOR["text"]),
    ):
        lab = label_font.render(label, True, COLOR["text_muted"])
        val = value_font.render(value, True, color)
        surface.blit(lab, (x_right - lab.get_width(), 28))
        surface.blit(val, (x_right - val.get_width(), 46))


# ── Timer bar ─────────────────────────────────────────────────────────────────

def draw_timer_bar(surface: pygame.Surface, fill: float, time_remaining: int) -> None:
    """Draw the remaining-time bar right under the header.

    Args:
        surface:        Native-resolution game surface.
        fill:           Remaining time ratio in [0.0, 1.0].
        time_remaining: Seconds left, picks the bar color.
    """
    color = COLOR["timer_low"] if time_remaining < TIMER_WARN_S else COLOR["timer"]
    pygame.draw.rect(surface, COLOR["panel_edge"], (0, HEADER_H, SCREEN_W, TIMER_BAR_H))
    width = int(SCREEN_W * max(0.0, min(1.0, fill)))
    if width > 0:
        pygame.draw.rect(surface, color, (0, HEADER_H, width, TIMER_BAR_H))


# ── Footer ────────────────────────────────────────────────────────────────────

def draw_footer(surface: pygame.Surface, delta: float) -> None:
    """Show the lightness difference of the level on screen."""
    y = SCREEN_H - FOOTER_H
    pygame.draw.line(surface, COLOR["panel_edge"], (0, y), (SCREEN_W, y))
    label = _font(FONT_SIZE_SM).render("CURRENT DELTA", True, COLOR["text_muted"])
    value = _font(FONT_SIZE_LG).render(f"{delta:.1f}% lightness", True, COLOR["text"])
    _blit_centered(surface, label, y + 16)
    _blit_centered(surface, value, y + 34)


# ── Buttons ───────────────────────────────────────────────────────────────────

def _draw_button(surface: pygame.Surface, text: str, y: int, hovered: bool) -> pygame.Rect:
    margin = 40
    rect = pygame.Rect(margin, y, SCREEN_W - margin * 2, BUTTON_H)
    fill = COLOR["button_hover"] if hovered else COLOR["button"]
    pygame.draw.rect(surface, fill, rect, border_radius=14)
    label = _font(FONT_SIZE_MD, bold=True).render(text, True, COLOR["text_light"])
    surface.blit(label, (rect.x + (rect.w - label.get_width()) // 2,
                         rect.y + (rect.h - label.get_height()) // 2))
    return rect


# ── Start screen ──────────────────────────────────────────────────────────────

def draw_start(surface: pygame.Surface, hovered: bool = False) -> pygame.Rect:
    """Draw the idle screen and return the START button rect."""
    title = _font(FONT_SIZE_XL, bold=True).render("Test Your Eyes.", True, COLOR["text"])
    _blit_centered(surface, title, 200)

    body_font = _font(FONT_SIZE_MD)
    for i, line in enumerate((
        "Find the block with the slightly",
        "different shade. As you progress,",
        "the difference becomes nearly invisible.",
    )):
        _blit_centered(surface, body_font.render(line, True, COLOR["text_muted"]), 260 + i * 20)

    return _draw_button(surface, "START CHALLENGE", 350, hovered)


# ── Game over screen ──────────────────────────────────────────────────────────

def draw_game_over(
    surface: pygame.Surface,
    score: int,
    grade: str,
    hovered: bool = False,
) -> pygame.Rect:
    """Draw the final report and return the TRY AGAIN button rect.

    Args:
        surface: Native-resolution game surface.
        score:   Tiles found in the run.
        grade:   Letter grade for the score.
        hovered: True if the cursor is over the button.
    """
    title = _font(FONT_SIZE_XL, bold=True).render("SESSION OVER", True, COLOR["text"])
    sub = _font(FONT_SIZE_SM).render("FINAL PERFORMANCE REPORT", True, COLOR["text_muted"])
    _blit_centered(surface, title, 170)
    _blit_centered(surface, sub, 215)

    cx = SCREEN_W // 2
    for x, value, label in (
        (cx - 70, str(score), "BLOCKS FOUND"),
        (cx + 70, grade, "VISION GRADE"),
    ):
        val = _font(FONT_SIZE_XL).render(value, True, COLOR["text"])
        lab = _font(FONT_SIZE_SM).render(label, True, COLOR["text_muted"])
        surface.blit(val, (x - val.get_width() // 2, 260))
        surface.blit(lab, (x - lab.get_width() // 2, 306))

    return _draw_button(surface, "TRY AGAIN", 360, hovered)


# ── Milestone flash ───────────────────────────────────────────────────────────

def draw_flash(surface: pygame.Surface, flash_color: RGBColor, alpha: float) -> None:
    """Tint the whole screen for milestone feedback.

    Args:
        surface:     Native-resolution game surface.
        flash_color: Tint color.
        alpha:       1.0 at the start of the flash, fading to 0.0.
    """
    if alpha <= 0.0:
        return
    overlay = pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA)
    tint = lerp_color(COLOR["background"], flash_color, alpha)
    overlay.fill((*tint, int(alpha * 90)))
    surface.blit(overlay, (0, 0))
