# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Value parser: text → ColorValue.

Accepted shapes::

    #rrggbb | rgb(...) | rgba(...) | hsl(...) | hsla(...)
    linear-gradient([<n>deg,] <stop>, <stop>, ...)
    radial-gradient([circle,] <stop>, <stop>, ...)

    stop = <color-token> [<n>[%]]

Stop selection is read from letter case: the first stop whose token is
upper-case (``#FF0000``, ``RGBA(...)``) is selected; with none marked, the
first stop is. A stop without a ``%`` position sits at 0.
"""

from __future__ import annotations

import re

from gradpick.convert.numeric import clamp_int, is_upper_token
from gradpick.errors import InvalidColorError, MinStopsViolation, ParseError
from gradpick.schema import ColorToken, ColorValue, Gradient, GradientKind, Solid, Stop

# Angle substituted when a linear gradient is written without one
DEFAULT_LINEAR_ANGLE = 90

_num = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"

_GRADIENT_RE = re.compile(
    r"^(linear-gradient|radial-gradient)\s*\((.*)\)$",
    re.IGNORECASE | re.DOTALL,
)
_WRAPPER_RE = re.compile(r"^(?:linear|radial)-gradient\s*\(", re.IGNORECASE)
_ANGLE_RE = re.compile(f"^({_num})deg$", re.IGNORECASE)
_STOP_RE = re.compile(
    f"^(?P<color>.+?)(?:\\s+(?P<pos>{_num})(?P<pct>%)?)?$",
    re.DOTALL,
)


def split_top_level(params: str) -> list[str]:
    """
    Split on commas that are not nested inside parentheses.

    Raises:
        ParseError: On unbalanced parentheses
    """
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    for ch in params:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise ParseError(f"Unbalanced ')' in {params!r}")
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    if depth != 0:
        raise ParseError(f"Unbalanced '(' in {params!r}")
    parts.append("".join(current).strip())
    return parts


def _parse_color(text: str) -> ColorToken:
    try:
        return ColorToken.parse(text)
    except InvalidColorError as e:
        raise ParseError(f"Invalid color token {text!r}: {e}") from e


def parse_stop(text: str) -> tuple[ColorToken, int, bool]:
    """
    Parse one ``<color> <n>%`` stop.

    Returns:
        (color, position, marked) where ``marked`` is the upper-case flag
    """
    m = _STOP_RE.match(text.strip())
    if not m or not m.group("color").strip():
        raise ParseError(f"Empty gradient stop: {text!r}")
    color_text = m.group("color").strip()
    color = _parse_color(color_text)

    position = 0
    if m.group("pos") is not None and m.group("pct"):
        position = clamp_int(float(m.group("pos")), 0, 100)

    return color, position, is_upper_token(color_text)


def _parse_gradient(kind: GradientKind, params: str) -> Gradient:
    parts = split_top_level(params)
    if not parts or parts == [""]:
        raise ParseError(f"{kind.value} has no stops")

    angle = None
    if kind == GradientKind.LINEAR:
        angle = DEFAULT_LINEAR_ANGLE
        m = _ANGLE_RE.match(parts[0])
        if m:
            angle = clamp_int(float(m.group(1)), 0, 360)
            parts = parts[1:]
    elif parts[0].lower() == "circle":
        parts = parts[1:]

    if not parts or any(not p for p in parts):
        raise ParseError(f"{kind.value} has an empty stop list")

    parsed = [parse_stop(p) for p in parts]
    marked = [i for i, (_, _, upper) in enumerate(parsed) if upper]
    selected = marked[0] if marked else 0

    stops = tuple(
        Stop(color=color, position=position, selected=(i == selected))
        for i, (color, position, _) in enumerate(parsed)
    )
    try:
        return Gradient(kind=kind, stops=stops, angle=angle)
    except MinStopsViolation as e:
        raise ParseError(str(e)) from e


def parse_value(text: str) -> ColorValue:
    """
    Parse a solid color or gradient value.

    Args:
        text: Value text, e.g. ``"#ff0000"`` or
            ``"linear-gradient(90deg, #FF0000 0%, #00ff00 100%)"``

    Returns:
        Solid or Gradient

    Raises:
        ParseError: For empty text, a gradient without (enough) stops,
            unbalanced parentheses or an invalid color token
    """
    if not isinstance(text, str) or not text.strip():
        raise ParseError("Value is empty")
    s = text.strip()

    m = _GRADIENT_RE.match(s)
    if m:
        kind = GradientKind(m.group(1).lower())
        return _parse_gradient(kind, m.group(2))
    if _WRAPPER_RE.match(s):
        raise ParseError(f"Unterminated gradient: {text!r}")

    return Solid(color=_parse_color(s))
