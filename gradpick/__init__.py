# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Gradpick -- CSS color and gradient values for picker widgets.

Parses a solid color or linear/radial gradient into a structured value,
converts between RGB, HSL, HSV, Hex and CMYK, edits gradient stops and
serializes back to canonical text.

Quick start::

    from gradpick import ColorPicker

    picker = ColorPicker(on_change=print)
    value = "linear-gradient(90deg, #FF0000 0%, #00ff00 100%)"
    value = picker.add_point(value, 50)
    picker.value_to_hsl(value)   # "hsl(0, 100%, 50%)"
"""

from __future__ import annotations

__version__ = "1.0.0"

from gradpick.errors import (
    GradpickError,
    InvalidColorError,
    MinStopsViolation,
    OutOfRange,
    ParseError,
)
from gradpick.runtime import (
    ColorPicker,
    Diagnostic,
    DiagnosticCode,
    PickerConfig,
    PickerDetails,
    RecencyTracker,
)
from gradpick.schema import (
    ColorToken,
    ColorValue,
    Gradient,
    GradientKind,
    Solid,
    Stop,
)
from gradpick.value import parse_value, serialize_value

__all__ = [
    # Core API
    "parse_value",
    "serialize_value",
    "ColorPicker",
    "PickerConfig",
    # Types (commonly needed)
    "ColorValue",
    "Solid",
    "Gradient",
    "GradientKind",
    "Stop",
    "ColorToken",
    "PickerDetails",
    "Diagnostic",
    "DiagnosticCode",
    "RecencyTracker",
    # Errors
    "GradpickError",
    "ParseError",
    "InvalidColorError",
    "MinStopsViolation",
    "OutOfRange",
    # Version
    "__version__",
]
