# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Stop editor.

Structural edits on a gradient's stop list. Every function takes a
Gradient and returns a new one; inputs are never modified. Each result
has exactly one selected stop.

Positions and angles out of range are clamped. Stop indices out of range
raise OutOfRange. Indices refer to ``gradient.stops`` as stored.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from gradpick.convert.numeric import clamp_int, is_number
from gradpick.errors import MinStopsViolation, OutOfRange
from gradpick.schema import MIN_STOPS, ColorToken, Gradient, GradientKind, Stop
from gradpick.value.parser import DEFAULT_LINEAR_ANGLE

# Position used by add_stop when none is given
DEFAULT_STOP_POSITION = 50


def _check_index(gradient: Gradient, index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int):
        raise OutOfRange(f"Stop index must be an integer, got {index!r}")
    if not 0 <= index < len(gradient.stops):
        raise OutOfRange(
            f"Stop index {index} out of range for {len(gradient.stops)} stops"
        )
    return index


def _position(value: float) -> int:
    if not is_number(value):
        raise ValueError(f"Position must be a number, got {value!r}")
    return clamp_int(value, 0, 100)


def select_stop(gradient: Gradient, index: int) -> Gradient:
    """Select the stop at ``index`` and deselect all others."""
    _check_index(gradient, index)
    stops = tuple(
        replace(s, selected=(i == index)) for i, s in enumerate(gradient.stops)
    )
    return replace(gradient, stops=stops)


def add_stop(
    gradient: Gradient,
    position: Optional[float] = None,
    color: Optional[ColorToken] = None,
) -> Gradient:
    """
    Append a new selected stop.

    Args:
        gradient: Gradient to extend
        position: Percent for the new stop (default 50, clamped to 0-100)
        color: Color for the new stop (default: the selected stop's color)
    """
    pos = DEFAULT_STOP_POSITION if position is None else _position(position)
    new_stop = Stop(
        color=color if color is not None else gradient.current_color,
        position=pos,
        selected=True,
    )
    stops = tuple(replace(s, selected=False) for s in gradient.stops)
    return replace(gradient, stops=stops + (new_stop,))


def delete_stop(gradient: Gradient, index: Optional[int] = None) -> Gradient:
    """
    Remove a stop (default: the selected one).

    If the removed stop was selected, the first remaining stop in
    serialized order becomes selected.

    Raises:
        OutOfRange: For an index outside the stop list
        MinStopsViolation: If fewer than two stops would remain
    """
    target = gradient.selected_index if index is None else _check_index(gradient, index)
    if len(gradient.stops) - 1 < MIN_STOPS:
        raise MinStopsViolation(
            f"A gradient must have at least {MIN_STOPS} stops"
        )

    remaining = [s for i, s in enumerate(gradient.stops) if i != target]
    if gradient.stops[target].selected:
        first = min(range(len(remaining)), key=lambda i: remaining[i].position)
        remaining = [replace(s, selected=(i == first)) for i, s in enumerate(remaining)]
    return replace(gradient, stops=tuple(remaining))


def move_stop(gradient: Gradient, index: int, position: float) -> Gradient:
    """Move one stop, clamping ``position`` to 0-100. Other stops are untouched."""
    _check_index(gradient, index)
    stops = list(gradient.stops)
    stops[index] = replace(stops[index], position=_position(position))
    return replace(gradient, stops=tuple(stops))


def recolor_selected(gradient: Gradient, color: ColorToken) -> Gradient:
    """Replace the selected stop's color, keeping its position and selection."""
    index = gradient.selected_index
    stops = list(gradient.stops)
    stops[index] = replace(stops[index], color=color)
    return replace(gradient, stops=tuple(stops))


def set_kind(
    gradient: Gradient,
    kind: GradientKind,
    angle: Optional[float] = None,
) -> Gradient:
    """
    Switch between linear and radial.

    Radial drops the angle. Linear takes ``angle`` (clamped to 0-360) or
    falls back to 90 degrees.
    """
    if kind == GradientKind.RADIAL:
        return replace(gradient, kind=kind, angle=None)
    if angle is None:
        degrees = DEFAULT_LINEAR_ANGLE
    elif is_number(angle):
        degrees = clamp_int(angle, 0, 360)
    else:
        raise ValueError(f"Angle must be a number, got {angle!r}")
    return replace(gradient, kind=kind, angle=degrees)


def set_angle(gradient: Gradient, degrees: float) -> Gradient:
    """Set the angle (clamped to 0-360); the gradient becomes linear."""
    return set_kind(gradient, GradientKind.LINEAR, degrees)
