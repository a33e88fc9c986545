"""
utils/color.py — Color model and helpers for Chroma Vision.

Two halves:
    - HSLColor, the perceptual color every tile is made of. Levels are
      built from one random base color plus a single copy whose lightness
      is shifted by the current delta.
    - RGB helpers used by the renderer to shade buttons and fade overlays.

Randomness always comes from an injected rng (anything with the
random.Random interface) so tests can script exact colors.
"""

from __future__ import annotations
import colorsys
from dataclasses import dataclass, replace
from typing import Tuple

from settings import HUE_RANGE, SATURATION_RANGE, LIGHTNESS_RANGE

RGBColor = Tuple[int, int, int]


@dataclass(frozen=True)
class HSLColor:
    """An immutable HSL color.

    Attributes:
        hue:        Degrees in [0, 360). Wraps.
        saturation: Percent, 40–80 for generated colors.
        lightness:  Percent, always within [0, 100].
    """

    hue: float
    saturation: float
    lightness: float

    def to_rgb(self) -> RGBColor:
        """Convert to an 8-bit RGB tuple for pygame drawing."""
        r, g, b = colorsys.hls_to_rgb(
            (self.hue % 360) / 360.0,
            self.lightness / 100.0,
            self.saturation / 100.0,
        )
        return (round(r * 255), round(g * 255), round(b * 255))

    def to_css(self) -> str:
        """Return a CSS hsl() string, e.g. 'hsl(210, 55%, 42%)'."""
        return f"hsl({self.hue:g}, {self.saturation:g}%, {self.lightness:g}%)"


def clamp(value, lo=0, hi=255):
    """Clamp a value to [lo, hi]. Defaults cover an 8-bit channel."""
    return max(lo, min(hi, value))


def generate_base_color(rng) -> HSLColor:
    """Return a random base color for a new level.

    Args:
        rng: random.Random-compatible source.

    Returns:
        HSLColor with whole-number hue, saturation and lightness drawn
        from HUE_RANGE, SATURATION_RANGE and LIGHTNESS_RANGE.
    """
    return HSLColor(
        hue=rng.randrange(*HUE_RANGE),
        saturation=rng.randrange(*SATURATION_RANGE),
        lightness=rng.randrange(*LIGHTNESS_RANGE),
    )


def derive_shifted_color(base: HSLColor, delta: float, rng) -> HSLColor:
    """Return base with its lightness moved by delta, up or down at random.

    Hue and saturation are never touched. The result is clamped into
    [0, 100], so near the range boundary the visible difference can be
    smaller than delta; it is not pushed the other way to compensate.

    Args:
        base:  The level's base color.
        delta: Lightness difference in percent.
        rng:   random.Random-compatible source, used once for the sign.

    Returns:
        The shifted HSLColor.
    """
    direction = 1 if rng.random() > 0.5 else -1
    return replace(base, lightness=clamp(base.lightness + delta * direction, 0, 100))


# ── RGB helpers (renderer) ────────────────────────────────────────────────────

def darker(color: RGBColor, amount: int = 24) -> RGBColor:
    """Return color with each channel lowered by amount, clamped to 0."""
    return tuple(clamp(c - amount) for c in color)


def lerp_color(a: RGBColor, b: RGBColor, t: float) -> RGBColor:
    """Linearly interpolate between two RGB colors.

    Args:
        a: Start color.
        b: End color.
        t: Interpolation factor, clamped to [0.0, 1.0]. 0 → a, 1 → b.

    Returns:
        Interpolated RGB tuple.
    """
    t = clamp(t, 0.0, 1.0)
    return tuple(clamp(int(x + (y - x) * t)) for x, y in zip(a, b))
