# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Picker session.

The caller-facing operations of a color/gradient picker. Each operation
takes the current value text, re-parses it, applies one edit and returns
the new text. Accepted edits are handed to ``on_change`` exactly once.

Two tiers of failure:

- Fatal: ParseError (bad input text) and OutOfRange (bad stop index)
  propagate to the caller. Nothing is emitted.
- Advisory: InvalidColorError, MinStopsViolation, defaulted arguments and
  gradient-only operations on a solid. The session logs a warning, forwards
  a Diagnostic to ``on_diagnostic`` and either completes with the
  documented default or returns the input unchanged.

The only state a session keeps is its RecencyTracker.

Example::

    picker = ColorPicker(on_change=print)
    value = "linear-gradient(90deg, #FF0000 0%, #00ff00 100%)"
    value = picker.add_point(value, 50)
    value = picker.set_lightness(value, 30)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from gradpick.convert.colorspace import (
    cmyk_to_rgb255,
    hex_to_rgb255,
    hsl_to_rgb255,
    hsv_to_rgb255,
    rgb255_to_hsl,
    rgb255_to_hsv,
)
from gradpick.convert.numeric import is_number
from gradpick.convert.tokens import cmyk_string, hex_string, hsl_string, hsv_string
from gradpick.errors import InvalidColorError, MinStopsViolation, ParseError
from gradpick.runtime.config import PickerConfig
from gradpick.runtime.history import RecencyTracker
from gradpick.schema import ColorToken, ColorValue, Gradient, GradientKind, Solid
from gradpick.value.editor import (
    add_stop,
    delete_stop,
    move_stop,
    recolor_selected,
    select_stop,
    set_angle,
    set_kind,
)
from gradpick.value.parser import parse_value
from gradpick.value.serializer import serialize_value

logger = logging.getLogger(__name__)


# =============================================================================
# Diagnostics
# =============================================================================


class DiagnosticCode(Enum):
    """Advisory conditions reported on the diagnostic channel."""

    INVALID_COLOR = "invalid_color"
    MIN_STOPS = "min_stops"
    DEFAULT_POSITION = "default_position"
    DEFAULT_INDEX = "default_index"
    GRADIENT_ONLY = "gradient_only"
    KIND_MISMATCH = "kind_mismatch"


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal condition raised while handling an operation."""

    code: DiagnosticCode
    message: str


@dataclass(frozen=True)
class PickerDetails:
    """
    Read-only summary of a value.

    Attributes:
        is_gradient: True for gradients
        gradient_type: "linear-gradient", "radial-gradient" or None
        degrees: Linear angle, None otherwise
        selected_point: Index of the selected stop (0 for solids)
        current_left: Position of the selected stop (0 for solids)
        current_color: Text of the color channel edits act on
        rgba: (r, g, b, a) of that color
        hsl: (H degrees, S %, L %) of that color, unrounded
    """

    is_gradient: bool
    gradient_type: Optional[str]
    degrees: Optional[int]
    selected_point: int
    current_left: int
    current_color: str
    rgba: tuple[int, int, int, float]
    hsl: tuple[float, float, float]


def _require(value: float, lo: float, hi: float, name: str, integer: bool = False) -> float:
    """Validate a channel input; out-of-range values are never clamped."""
    if not is_number(value):
        raise InvalidColorError(f"{name} must be a number, got {value!r}")
    if integer and not float(value).is_integer():
        raise InvalidColorError(f"{name} must be an integer, got {value}")
    if not lo <= value <= hi:
        raise InvalidColorError(f"{name} must be {lo}-{hi}, got {value}")
    return value


# =============================================================================
# Session
# =============================================================================


class ColorPicker:
    """
    One picker session.

    Args:
        on_change: Receives the new value text after every accepted edit
        on_diagnostic: Optional receiver for advisory Diagnostics
        config: Session configuration (defaults if None)
    """

    def __init__(
        self,
        on_change: Callable[[str], None],
        *,
        on_diagnostic: Optional[Callable[[Diagnostic], None]] = None,
        config: Optional[PickerConfig] = None,
    ):
        self.config = config or PickerConfig()
        self.on_change = on_change
        self.on_diagnostic = on_diagnostic
        self._history = RecencyTracker(self.config.history_size)

    def __enter__(self) -> ColorPicker:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """End the session and drop its color history."""
        self._history.clear()

    @property
    def previous_colors(self) -> tuple[str, ...]:
        """Recently committed colors, most recent first."""
        return self._history.history()

    def observe(self, value: str) -> bool:
        """Record the current color of an externally supplied value."""
        return self._history.record(parse_value(value).current_color)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _diagnose(self, code: DiagnosticCode, message: str) -> Diagnostic:
        diagnostic = Diagnostic(code=code, message=message)
        logger.warning("%s: %s", code.value, message)
        if self.on_diagnostic is not None:
            self.on_diagnostic(diagnostic)
        return diagnostic

    def _commit(self, value: ColorValue) -> str:
        text = serialize_value(value)
        self._history.record(value.current_color)
        logger.debug("Committed %s", text)
        self.on_change(text)
        return text

    def _gradient(self, value: str, operation: str) -> Optional[Gradient]:
        """Parse ``value``; report and return None if it is not a gradient."""
        current = parse_value(value)
        if isinstance(current, Gradient):
            return current
        self._diagnose(
            DiagnosticCode.GRADIENT_ONLY,
            f"{operation} only applies when the value is a gradient",
        )
        return None

    def _recolor(self, value: str, build: Callable[[ColorToken], ColorToken]) -> str:
        """Apply a color edit to the solid or to the selected stop."""
        current = parse_value(value)
        try:
            color = build(current.current_color)
        except InvalidColorError as e:
            self._diagnose(DiagnosticCode.INVALID_COLOR, f"Edit discarded: {e}")
            return value

        if isinstance(current, Gradient):
            return self._commit(recolor_selected(current, color))
        return self._commit(Solid(color=color))

    # -------------------------------------------------------------------------
    # Mode
    # -------------------------------------------------------------------------

    def set_solid(self, color: Optional[str] = None) -> str:
        """Switch to a solid color (default: ``config.default_color``)."""
        parsed = parse_value(color or self.config.default_color)
        if not isinstance(parsed, Solid):
            raise ParseError(f"Expected a solid color, got {color!r}")
        return self._commit(parsed)

    def set_gradient(self, gradient: Optional[str] = None) -> str:
        """Switch to a gradient (default: ``config.default_gradient``)."""
        parsed = parse_value(gradient or self.config.default_gradient)
        if not isinstance(parsed, Gradient):
            raise ParseError(f"Expected a gradient, got {gradient!r}")
        return self._commit(parsed)

    def set_linear(self, value: str) -> str:
        """Make the gradient linear; a radial one gets the default angle."""
        current = self._gradient(value, "set_linear")
        if current is None:
            return value
        angle = current.angle if current.kind == GradientKind.LINEAR else self.config.default_linear_angle
        return self._commit(set_kind(current, GradientKind.LINEAR, angle))

    def set_radial(self, value: str) -> str:
        """Make the gradient radial (``circle``)."""
        current = self._gradient(value, "set_radial")
        if current is None:
            return value
        return self._commit(set_kind(current, GradientKind.RADIAL))

    def set_degrees(self, value: str, degrees: float) -> str:
        """
        Set the linear angle, clamped to 0-360.

        A radial gradient becomes linear; that is reported as a diagnostic.
        """
        current = self._gradient(value, "set_degrees")
        if current is None:
            return value
        if current.kind != GradientKind.LINEAR:
            self._diagnose(
                DiagnosticCode.KIND_MISMATCH,
                "Updating degrees on a radial gradient changes it to linear",
            )
        return self._commit(set_angle(current, degrees))

    # -------------------------------------------------------------------------
    # RGBA channels
    # -------------------------------------------------------------------------

    def set_red(self, value: str, red: int) -> str:
        def build(c: ColorToken) -> ColorToken:
            return ColorToken.from_rgba(int(_require(red, 0, 255, "Red", integer=True)), c.g, c.b, c.a)
        return self._recolor(value, build)

    def set_green(self, value: str, green: int) -> str:
        def build(c: ColorToken) -> ColorToken:
            return ColorToken.from_rgba(c.r, int(_require(green, 0, 255, "Green", integer=True)), c.b, c.a)
        return self._recolor(value, build)

    def set_blue(self, value: str, blue: int) -> str:
        def build(c: ColorToken) -> ColorToken:
            return ColorToken.from_rgba(c.r, c.g, int(_require(blue, 0, 255, "Blue", integer=True)), c.a)
        return self._recolor(value, build)

    def set_alpha(self, value: str, alpha: float) -> str:
        """Set opacity as a percentage (0-100)."""
        def build(c: ColorToken) -> ColorToken:
            return ColorToken.from_rgba(c.r, c.g, c.b, _require(alpha, 0, 100, "Alpha") / 100.0)
        return self._recolor(value, build)

    # -------------------------------------------------------------------------
    # HSL channels (the other two HSL channels are held fixed)
    # -------------------------------------------------------------------------

    def set_hue(self, value: str, hue: float) -> str:
        def build(c: ColorToken) -> ColorToken:
            h = _require(hue, 0, 360, "Hue")
            _, s, l = rgb255_to_hsl(c.r, c.g, c.b)
            return ColorToken.from_rgba(*hsl_to_rgb255(h, s, l), c.a)
        return self._recolor(value, build)

    def set_saturation(self, value: str, saturation: float) -> str:
        def build(c: ColorToken) -> ColorToken:
            s = _require(saturation, 0, 100, "Saturation")
            h, _, l = rgb255_to_hsl(c.r, c.g, c.b)
            return ColorToken.from_rgba(*hsl_to_rgb255(h, s, l), c.a)
        return self._recolor(value, build)

    def set_lightness(self, value: str, lightness: float) -> str:
        def build(c: ColorToken) -> ColorToken:
            l = _require(lightness, 0, 100, "Lightness")
            h, s, _ = rgb255_to_hsl(c.r, c.g, c.b)
            return ColorToken.from_rgba(*hsl_to_rgb255(h, s, l), c.a)
        return self._recolor(value, build)

    # -------------------------------------------------------------------------
    # HSV channels
    # -------------------------------------------------------------------------

    def set_hsv_hue(self, value: str, hue: float) -> str:
        def build(c: ColorToken) -> ColorToken:
            h = _require(hue, 0, 360, "Hue")
            _, s, v = rgb255_to_hsv(c.r, c.g, c.b)
            return ColorToken.from_rgba(*hsv_to_rgb255(h, s, v), c.a)
        return self._recolor(value, build)

    def set_hsv_saturation(self, value: str, saturation: float) -> str:
        def build(c: ColorToken) -> ColorToken:
            s = _require(saturation, 0, 100, "Saturation")
            h, _, v = rgb255_to_hsv(c.r, c.g, c.b)
            return ColorToken.from_rgba(*hsv_to_rgb255(h, s, v), c.a)
        return self._recolor(value, build)

    def set_value(self, value: str, brightness: float) -> str:
        """Set the HSV value (brightness) channel, 0-100."""
        def build(c: ColorToken) -> ColorToken:
            v = _require(brightness, 0, 100, "Value")
            h, s, _ = rgb255_to_hsv(c.r, c.g, c.b)
            return ColorToken.from_rgba(*hsv_to_rgb255(h, s, v), c.a)
        return self._recolor(value, build)

    # -------------------------------------------------------------------------
    # Hex / CMYK input
    # -------------------------------------------------------------------------

    def set_hex(self, value: str, hex_color: str) -> str:
        """Set the color from ``#rrggbb``, keeping the current alpha."""
        def build(c: ColorToken) -> ColorToken:
            try:
                r, g, b = hex_to_rgb255(hex_color)
            except (ValueError, AttributeError) as e:
                raise InvalidColorError(str(e)) from e
            return ColorToken.from_rgba(r, g, b, c.a)
        return self._recolor(value, build)

    def set_cmyk(self, value: str, c: float, m: float, y: float, k: float) -> str:
        """Set the color from CMYK fractions (0-1), keeping the current alpha."""
        def build(current: ColorToken) -> ColorToken:
            channels = [
                _require(x, 0, 1, name) for x, name in zip((c, m, y, k), "CMYK")
            ]
            return ColorToken.from_rgba(*cmyk_to_rgb255(*channels), current.a)
        return self._recolor(value, build)

    # -------------------------------------------------------------------------
    # Stops
    # -------------------------------------------------------------------------

    def select_point(self, value: str, index: int) -> str:
        """
        Select the stop at ``index``.

        Raises:
            OutOfRange: For an index outside the stop list
        """
        current = self._gradient(value, "select_point")
        if current is None:
            return value
        return self._commit(select_stop(current, index))

    def add_point(self, value: str, left: Optional[float] = None) -> str:
        """Add a stop at ``left`` percent, colored like the selected stop."""
        current = self._gradient(value, "add_point")
        if current is None:
            return value
        if left is None:
            left = self.config.default_stop_position
            self._diagnose(
                DiagnosticCode.DEFAULT_POSITION,
                f"No position given for the new stop; defaulted to {left}",
            )
        return self._commit(add_stop(current, left))

    def delete_point(self, value: str, index: Optional[int] = None) -> str:
        """
        Delete the stop at ``index`` (default: the selected stop).

        On a two-stop gradient the edit is discarded and reported.

        Raises:
            OutOfRange: For an index outside the stop list
        """
        current = self._gradient(value, "delete_point")
        if current is None:
            return value
        try:
            edited = delete_stop(current, index)
        except MinStopsViolation as e:
            self._diagnose(
                DiagnosticCode.MIN_STOPS,
                f"{e}; disable the delete control at two stops",
            )
            return value
        if index is None:
            self._diagnose(
                DiagnosticCode.DEFAULT_INDEX,
                "No stop index given; deleted the selected stop",
            )
        return self._commit(edited)

    def set_point_left(self, value: str, left: float) -> str:
        """Move the selected stop to ``left`` percent (clamped to 0-100)."""
        current = self._gradient(value, "set_point_left")
        if current is None:
            return value
        return self._commit(move_stop(current, current.selected_index, left))

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def value_to_hsl(self, value: str) -> str:
        return hsl_string(parse_value(value).current_color.rgba)

    def value_to_hsv(self, value: str) -> str:
        return hsv_string(parse_value(value).current_color.rgba)

    def value_to_hex(self, value: str) -> str:
        return hex_string(parse_value(value).current_color.rgba)

    def value_to_cmyk(self, value: str) -> str:
        return cmyk_string(parse_value(value).current_color.rgba)

    def details(self, value: str) -> PickerDetails:
        """Summarize ``value`` for display."""
        current = parse_value(value)
        color = current.current_color
        if isinstance(current, Gradient):
            selected = current.selected_index
            return PickerDetails(
                is_gradient=True,
                gradient_type=current.kind.value,
                degrees=current.angle,
                selected_point=selected,
                current_left=current.stops[selected].position,
                current_color=color.text,
                rgba=color.rgba,
                hsl=rgb255_to_hsl(color.r, color.g, color.b),
            )
        return PickerDetails(
            is_gradient=False,
            gradient_type=None,
            degrees=None,
            selected_point=0,
            current_left=0,
            current_color=color.text,
            rgba=color.rgba,
            hsl=rgb255_to_hsl(color.r, color.g, color.b),
        )

    def gradient_object(self, value: str) -> dict:
        """Dictionary form of ``value`` (see ``Gradient.to_dict``)."""
        return parse_value(value).to_dict()
