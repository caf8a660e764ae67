# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Value serializer: ColorValue → canonical text.

Inverse of the parser. Gradient stops are emitted ascending by position
(stable), each color upper-case iff its stop is selected. A selected token
with no letters to carry the case (``#000000``) is written as
``RGBA(r, g, b, a)`` so the selection survives a round trip.
"""

from __future__ import annotations

from gradpick.convert.numeric import apply_case, has_cased_letters
from gradpick.convert.tokens import rgba_token
from gradpick.schema import ColorToken, ColorValue, Gradient, GradientKind, Solid, Stop


def render_color(color: ColorToken, selected: bool) -> str:
    """Token text with the selection encoded as letter case."""
    text = color.text
    if selected and not has_cased_letters(text):
        text = rgba_token(*color.rgba)
    return apply_case(text, selected)


def serialize_stop(stop: Stop) -> str:
    return f"{render_color(stop.color, stop.selected)} {stop.position}%"


def serialize_gradient(gradient: Gradient) -> str:
    """
    Serialize a gradient.

    Example:
        ``linear-gradient(90deg, #FF0000 0%, #00ff00 100%)``
    """
    if gradient.kind == GradientKind.LINEAR:
        head = f"{gradient.angle}deg"
    else:
        head = "circle"
    stops = ", ".join(serialize_stop(s) for s in gradient.sorted_stops())
    return f"{gradient.kind.value}({head}, {stops})"


def serialize_value(value: ColorValue) -> str:
    """Serialize a Solid (lower-cased token) or a Gradient."""
    if isinstance(value, Solid):
        return value.color.text.lower()
    if isinstance(value, Gradient):
        return serialize_gradient(value)
    raise TypeError(f"Expected Solid or Gradient, got {type(value)}")
