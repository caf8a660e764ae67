# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Color token syntax.

Parses the color tokens the value grammar accepts into an RGBA quadruple
and renders the derived string forms (HSL, HSV, Hex, CMYK).

Supported tokens: ``#rrggbb``, ``rgb(r, g, b)``, ``rgba(r, g, b, a)``,
``hsl(h, s%, l%)`` and ``hsla(h, s%, l%, a)``, case-insensitive.
Out-of-range components make a token invalid; nothing is clamped.
"""

from __future__ import annotations

import re
from typing import Optional

from gradpick.convert.colorspace import (
    hex_to_rgb255,
    hsl_to_rgb255,
    rgb255_to_cmyk,
    rgb255_to_hex,
    rgb255_to_hsl,
    rgb255_to_hsv,
)
from gradpick.convert.numeric import format_number, round_half_up, round_places
from gradpick.errors import InvalidColorError

RGBA = tuple[int, int, int, float]

# Regular expression patterns
_ws = r"\s*"
_num = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"
_comma = f"{_ws},{_ws}"

_HEX_RE = re.compile(r"^#[0-9a-f]{6}$", re.IGNORECASE)

_RGB_RE = re.compile(
    f"^rgb{_ws}\\({_ws}({_num}){_comma}({_num}){_comma}({_num}){_ws}\\)$",
    re.IGNORECASE,
)

_RGBA_RE = re.compile(
    f"^rgba{_ws}\\({_ws}({_num}){_comma}({_num}){_comma}({_num}){_comma}({_num}){_ws}\\)$",
    re.IGNORECASE,
)

_HSL_RE = re.compile(
    f"^hsl{_ws}\\({_ws}({_num})(?:deg)?{_comma}({_num})%{_comma}({_num})%{_ws}\\)$",
    re.IGNORECASE,
)

_HSLA_RE = re.compile(
    f"^hsla{_ws}\\({_ws}({_num})(?:deg)?{_comma}({_num})%{_comma}({_num})%{_comma}({_num}){_ws}\\)$",
    re.IGNORECASE,
)


# =============================================================================
# Component checks
# =============================================================================


def _channel(text: str, token: str) -> int:
    value = float(text)
    if not value.is_integer() or not 0 <= value <= 255:
        raise InvalidColorError(
            f"RGB channel must be an integer 0-255, got {text} in {token!r}"
        )
    return int(value)


def _alpha(text: Optional[str], token: str) -> float:
    if text is None:
        return 1.0
    value = float(text)
    if not 0.0 <= value <= 1.0:
        raise InvalidColorError(f"Alpha must be 0-1, got {text} in {token!r}")
    return value


def _percent(text: str, name: str, token: str) -> float:
    value = float(text)
    if not 0.0 <= value <= 100.0:
        raise InvalidColorError(f"{name} must be 0-100%, got {text}% in {token!r}")
    return value


def _degrees(text: str, token: str) -> float:
    value = float(text)
    if not 0.0 <= value <= 360.0:
        raise InvalidColorError(f"Hue must be 0-360, got {text} in {token!r}")
    return value % 360.0


# =============================================================================
# Token → RGBA
# =============================================================================


def to_rgba(token: str) -> RGBA:
    """
    Parse a color token to an (r, g, b, a) quadruple.

    Raises:
        InvalidColorError: If the token is not a supported color or a
            component is out of range.
    """
    if not isinstance(token, str):
        raise InvalidColorError(f"Color token must be a string, got {type(token).__name__}")
    s = token.strip()

    if _HEX_RE.match(s):
        r, g, b = hex_to_rgb255(s)
        return r, g, b, 1.0

    m = _RGB_RE.match(s)
    if m:
        R, G, B = m.groups()
        return _channel(R, token), _channel(G, token), _channel(B, token), 1.0

    m = _RGBA_RE.match(s)
    if m:
        R, G, B, A = m.groups()
        return _channel(R, token), _channel(G, token), _channel(B, token), _alpha(A, token)

    m = _HSL_RE.match(s) or _HSLA_RE.match(s)
    if m:
        groups = m.groups()
        h = _degrees(groups[0], token)
        sat = _percent(groups[1], "Saturation", token)
        light = _percent(groups[2], "Lightness", token)
        a = _alpha(groups[3] if len(groups) > 3 else None, token)
        r, g, b = hsl_to_rgb255(h, sat, light)
        return r, g, b, a

    raise InvalidColorError(f"Unsupported color token: {token!r}")


def is_valid(token: str) -> bool:
    """True if ``token`` parses to an in-range color."""
    try:
        to_rgba(token)
    except InvalidColorError:
        return False
    return True


def rgba_token(r: int, g: int, b: int, a: float = 1.0) -> str:
    """Render a canonical ``rgba(r, g, b, a)`` token; alpha to 2 decimals."""
    return f"rgba({r}, {g}, {b}, {format_number(a)})"


def normalize_alpha(a: float) -> float:
    """Alpha as stored on constructed tokens (2 decimals)."""
    return round_places(a, 2)


# =============================================================================
# Derived representations
# =============================================================================


def to_hsl(token: str) -> tuple[float, float, float, float]:
    """(H degrees, S %, L %, alpha) for a token."""
    r, g, b, a = to_rgba(token)
    h, s, l = rgb255_to_hsl(r, g, b)
    return h, s, l, a


def to_hsv(token: str) -> tuple[float, float, float, float]:
    """(H degrees, S %, V %, alpha) for a token."""
    r, g, b, a = to_rgba(token)
    h, s, v = rgb255_to_hsv(r, g, b)
    return h, s, v, a


def to_hex(token: str) -> str:
    """Lower-case ``#rrggbb`` for a token (alpha dropped)."""
    r, g, b, _ = to_rgba(token)
    return rgb255_to_hex(r, g, b)


def to_cmyk(token: str) -> tuple[float, float, float, float]:
    """CMYK fractions for a token (alpha dropped)."""
    r, g, b, _ = to_rgba(token)
    return rgb255_to_cmyk(r, g, b)


def _cylindrical_string(prefix: str, h: float, x: float, y: float, a: float) -> str:
    body = f"{round_half_up(h) % 360}, {round_half_up(x)}%, {round_half_up(y)}%"
    if a < 1.0:
        return f"{prefix}a({body}, {format_number(a)})"
    return f"{prefix}({body})"


def hsl_string(rgba: RGBA) -> str:
    """
    Format an RGBA quadruple as an HSL string.

    Example:
        >>> hsl_string((255, 0, 0, 1.0))
        'hsl(0, 100%, 50%)'
    """
    r, g, b, a = rgba
    h, s, l = rgb255_to_hsl(r, g, b)
    return _cylindrical_string("hsl", h, s, l, a)


def hsv_string(rgba: RGBA) -> str:
    """Format an RGBA quadruple as ``hsv(h, s%, v%)`` (``hsva`` when translucent)."""
    r, g, b, a = rgba
    h, s, v = rgb255_to_hsv(r, g, b)
    return _cylindrical_string("hsv", h, s, v, a)


def hex_string(rgba: RGBA) -> str:
    r, g, b, _ = rgba
    return rgb255_to_hex(r, g, b)


def cmyk_string(rgba: RGBA) -> str:
    """Format as ``cmyk(c, m, y, k)`` with fractions to 2 decimals."""
    r, g, b, _ = rgba
    c, m, y, k = rgb255_to_cmyk(r, g, b)
    return f"cmyk({format_number(c)}, {format_number(m)}, {format_number(y)}, {format_number(k)})"
