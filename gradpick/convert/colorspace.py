# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Color space conversions.

sRGB is the hub: every other space converts to and from it.

    HSL  ↔ sRGB ↔ HSV
            ↕
      Hex, CMYK

Array functions take and return float arrays of shape (..., 3) (CMYK is
(..., 4)) with sRGB channels in [0, 1], hue in degrees [0, 360) and the
remaining components as fractions in [0, 1]. The ``*255`` helpers work on
integer channels and percentages, which is what color tokens carry.

All conversions are pure NumPy.
"""

from __future__ import annotations

import re

import numpy as np
from numpy.typing import NDArray

from gradpick.convert.numeric import round_half_up


# Which of (C, X, 0) lands in R, G, B for each 60° hue sector
_SECTOR_INDEX = np.array([
    [0, 1, 2],
    [1, 0, 2],
    [2, 0, 1],
    [2, 1, 0],
    [1, 2, 0],
    [0, 2, 1],
], dtype=np.intp)


# =============================================================================
# Shared helpers
# =============================================================================


def _hue(rgb: NDArray[np.float64], cmax: NDArray[np.float64], delta: NDArray[np.float64]) -> NDArray[np.float64]:
    """Hue in degrees [0, 360); 0 for achromatic input."""
    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]
    safe = np.where(delta == 0, 1.0, delta)
    h = np.where(
        cmax == r,
        np.mod((g - b) / safe, 6.0),
        np.where(cmax == g, (b - r) / safe + 2.0, (r - g) / safe + 4.0),
    )
    h = np.where(delta == 0, 0.0, h * 60.0)
    return np.mod(h, 360.0)


def _chroma_to_rgb(
    h: NDArray[np.float64],
    c: NDArray[np.float64],
    m: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Rebuild sRGB from hue, chroma and the lightness offset m."""
    hp = np.mod(h, 360.0) / 60.0
    x = c * (1.0 - np.abs(np.mod(hp, 2.0) - 1.0))
    sector = np.floor(hp).astype(np.intp) % 6
    table = np.stack([c, x, np.zeros_like(c)], axis=-1)
    rgb1 = np.take_along_axis(table, _SECTOR_INDEX[sector], axis=-1)
    return np.clip(rgb1 + np.expand_dims(m, -1), 0.0, 1.0)


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def rgb_to_hsl(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HSL.

    Args:
        rgb: Array of shape (..., 3) with sRGB values [0, 1]

    Returns:
        Array of shape (..., 3) with (H, S, L); H in degrees [0, 360),
        S and L in [0, 1]
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    cmax = rgb.max(axis=-1)
    cmin = rgb.min(axis=-1)
    delta = cmax - cmin

    L = (cmax + cmin) / 2.0
    denom = 1.0 - np.abs(2.0 * L - 1.0)
    S = np.where(delta == 0, 0.0, delta / np.where(denom == 0, 1.0, denom))
    H = _hue(rgb, cmax, delta)

    return np.stack([H, np.clip(S, 0.0, 1.0), L], axis=-1)


def hsl_to_rgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSL to sRGB [0,1].

    Inverse of rgb_to_hsl. Hue wraps modulo 360.
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    H = hsl[..., 0]
    S = hsl[..., 1]
    L = hsl[..., 2]

    C = (1.0 - np.abs(2.0 * L - 1.0)) * S
    return _chroma_to_rgb(H, C, L - C / 2.0)


# =============================================================================
# sRGB ↔ HSV
# =============================================================================


def rgb_to_hsv(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HSV.

    Returns:
        Array of shape (..., 3) with (H, S, V); H in degrees [0, 360),
        S and V in [0, 1]
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    cmax = rgb.max(axis=-1)
    cmin = rgb.min(axis=-1)
    delta = cmax - cmin

    S = np.where(cmax == 0, 0.0, delta / np.where(cmax == 0, 1.0, cmax))
    H = _hue(rgb, cmax, delta)

    return np.stack([H, S, cmax], axis=-1)


def hsv_to_rgb(hsv: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert HSV to sRGB [0,1]. Inverse of rgb_to_hsv."""
    hsv = np.asarray(hsv, dtype=np.float64)
    H = hsv[..., 0]
    S = hsv[..., 1]
    V = hsv[..., 2]

    C = V * S
    return _chroma_to_rgb(H, C, V - C)


# =============================================================================
# sRGB ↔ CMYK
# =============================================================================


def rgb_to_cmyk(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to CMYK.

    k = 1 - max(r, g, b); c = (1 - r - k) / (1 - k), and likewise for m, y.
    Pure black (k = 1) yields c = m = y = 0.

    Returns:
        Array of shape (..., 4) with (C, M, Y, K) in [0, 1]
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    K = 1.0 - rgb.max(axis=-1)
    black = np.expand_dims(K >= 1.0, -1)
    k = np.expand_dims(K, -1)

    denom = np.where(black, 1.0, 1.0 - k)
    cmy = np.where(black, 0.0, (1.0 - rgb - k) / denom)

    return np.concatenate([np.clip(cmy, 0.0, 1.0), k], axis=-1)


def cmyk_to_rgb(cmyk: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CMYK [0,1] to sRGB [0,1]."""
    cmyk = np.asarray(cmyk, dtype=np.float64)
    k = cmyk[..., 3:4]
    return np.clip((1.0 - cmyk[..., :3]) * (1.0 - k), 0.0, 1.0)


# =============================================================================
# Convenience: integer channels
# =============================================================================


def _to_unit(r: int, g: int, b: int) -> NDArray[np.float64]:
    return np.array([r, g, b], dtype=np.float64) / 255.0


def _to_255(rgb: NDArray[np.float64]) -> tuple[int, int, int]:
    r, g, b = (round_half_up(float(v) * 255.0) for v in rgb)
    return r, g, b


def rgb255_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert 0-255 channels to HSL.

    Returns:
        (H, S, L) with H in degrees and S, L in percent (0-100), unrounded
    """
    h, s, l = rgb_to_hsl(_to_unit(r, g, b))
    return float(h), float(s) * 100.0, float(l) * 100.0


def hsl_to_rgb255(h: float, s: float, l: float) -> tuple[int, int, int]:
    """Convert HSL (H degrees, S and L percent) to 0-255 channels."""
    return _to_255(hsl_to_rgb(np.array([h, s / 100.0, l / 100.0])))


def rgb255_to_hsv(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert 0-255 channels to HSV (H degrees, S and V percent)."""
    h, s, v = rgb_to_hsv(_to_unit(r, g, b))
    return float(h), float(s) * 100.0, float(v) * 100.0


def hsv_to_rgb255(h: float, s: float, v: float) -> tuple[int, int, int]:
    """Convert HSV (H degrees, S and V percent) to 0-255 channels."""
    return _to_255(hsv_to_rgb(np.array([h, s / 100.0, v / 100.0])))


def rgb255_to_cmyk(r: int, g: int, b: int) -> tuple[float, float, float, float]:
    """Convert 0-255 channels to CMYK fractions."""
    c, m, y, k = rgb_to_cmyk(_to_unit(r, g, b))
    return float(c), float(m), float(y), float(k)


def cmyk_to_rgb255(c: float, m: float, y: float, k: float) -> tuple[int, int, int]:
    """Convert CMYK fractions to 0-255 channels."""
    return _to_255(cmyk_to_rgb(np.array([c, m, y, k])))


# =============================================================================
# Hex
# =============================================================================

_HEX_RE = re.compile(r"^#?([0-9a-f]{6})$", re.IGNORECASE)


def rgb255_to_hex(r: int, g: int, b: int) -> str:
    """
    Convert 0-255 channels to a hex string.

    Returns:
        Lower-case hex string like "#3941c8"
    """
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb255(hex_color: str) -> tuple[int, int, int]:
    """
    Convert a hex string to 0-255 channels.

    Args:
        hex_color: Hex string like "#3941C8" or "3941c8"

    Raises:
        ValueError: If the string is not six hex digits
    """
    m = _HEX_RE.match(hex_color.strip())
    if not m:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    digits = m.group(1)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
