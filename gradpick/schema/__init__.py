# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

All types in this module are immutable (frozen dataclasses).
A value is rebuilt from text for every operation and never edited in place.
"""

from gradpick.schema.color_value import (
    MIN_STOPS,
    ColorToken,
    ColorValue,
    Gradient,
    GradientKind,
    Solid,
    Stop,
    value_from_dict,
)

__all__ = [
    # Core types
    "ColorToken",
    "Stop",
    # Value shapes
    "Solid",
    "Gradient",
    "GradientKind",
    "ColorValue",
    # Helpers
    "value_from_dict",
    "MIN_STOPS",
]
