"""Deterministic spectrum colors derived from label text.

Every client derives the same pair of end colors for a round from its two
labels alone, with no shared state or lookup:
- label -> hue: curated hints for common words, SHA-256 fallback otherwise
- hue -> RGB at fixed saturation/lightness tuned for dark backgrounds
- colors are packed 24-bit RGB integers (0xRRGGBB)
"""

from __future__ import annotations

import colorsys
import hashlib

from hivemind.core.numeric import clamp, jitter, round_half_up

__all__ = [
    "color_to_css_hex",
    "derive_color_from_label",
    "get_spectrum_colors",
    "hash_label",
    "jitter",
    "label_to_hue",
    "lerp_color",
    "pack_rgb",
    "split_rgb",
]

MAX_COLOR = 0xFFFFFF

# Medium-high saturation and medium lightness stay legible on dark backgrounds
LABEL_SATURATION = 0.72
LABEL_LIGHTNESS = 0.56

# Hashed hues in [LOW, HIGH) read as muddy greens; shifted by MUDDY_HUE_SHIFT
MUDDY_HUE_LOW = 90
MUDDY_HUE_HIGH = 150
MUDDY_HUE_SHIFT = 60

# Curated hues for common label words, matched as substrings in this order
LABEL_HUE_HINTS: dict[str, int] = {
    "coffee": 30,
    "tea": 100,
    "spicy": 12,
    "sweet": 45,
    "horror": 350,
    "romance": 340,
    "sci": 200,
    "science": 200,
    "tech": 210,
    "technology": 210,
    "cold": 200,
    "warm": 35,
    "left": 260,
    "right": 20,
}


def hash_label(label: str) -> int:
    """Stable 32-bit integer for a label.

    Uses the first four bytes of the SHA-256 digest, so the value is the
    same across processes and platforms (unlike the builtin hash()).
    """
    return int.from_bytes(
        hashlib.sha256(label.encode("utf-8")).digest()[:4],
        byteorder="big",
    )


def label_to_hue(label: str) -> int:
    """Map a label to a hue in degrees [0, 360).

    Args:
        label: Free-text label. Case and surrounding whitespace are ignored.

    Returns:
        Hue in degrees.
    """
    key = label.strip().lower()
    for hint, hue in LABEL_HUE_HINTS.items():
        if hint in key:
            return hue

    hue = hash_label(key) % 360
    if MUDDY_HUE_LOW <= hue < MUDDY_HUE_HIGH:
        hue = (hue + MUDDY_HUE_SHIFT) % 360
    return hue


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack three 8-bit channels into 0xRRGGBB."""
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def split_rgb(color: int) -> tuple[int, int, int]:
    """Unpack 0xRRGGBB into (r, g, b)."""
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _hsl_to_color(hue: float, saturation: float, lightness: float) -> int:
    # colorsys takes HLS order with all components in [0, 1]
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness, saturation)
    return pack_rgb(
        round_half_up(r * 255),
        round_half_up(g * 255),
        round_half_up(b * 255),
    )


def derive_color_from_label(label: str) -> int:
    """Derive a packed RGB color from label text.

    Pure function of the text: the same label always gives the same color.
    Empty labels are valid and hash like any other string.

    Args:
        label: Spectrum end label, e.g. "Blockbuster".

    Returns:
        Integer in [0, 0xFFFFFF].
    """
    return _hsl_to_color(label_to_hue(label), LABEL_SATURATION, LABEL_LIGHTNESS)


def get_spectrum_colors(left_label: str, right_label: str) -> tuple[int, int]:
    """Derive the (left, right) end colors for a round."""
    return derive_color_from_label(left_label), derive_color_from_label(right_label)


def lerp_color(color_a: int, color_b: int, t: float) -> int:
    """Interpolate between two packed colors, channel by channel.

    t=0 returns color_a and t=1 returns color_b exactly. Values of t outside
    [0, 1] extrapolate; each channel is still clamped to [0, 255].

    Args:
        color_a: Start color (0xRRGGBB).
        color_b: End color (0xRRGGBB).
        t: Interpolation factor.

    Returns:
        Interpolated color (0xRRGGBB).
    """
    channels = []
    for a, b in zip(split_rgb(color_a), split_rgb(color_b)):
        channel = round_half_up(a + (b - a) * t)
        channels.append(int(clamp(channel, 0, 255)))
    return pack_rgb(*channels)


def color_to_css_hex(color: int) -> str:
    """Format a packed color as a CSS hex string, e.g. "#ff9933"."""
    return f"#{color & MAX_COLOR:06x}"
