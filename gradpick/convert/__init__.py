# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Color conversion core for Gradpick.

Pure functions: numeric helpers, color space math and color token syntax.
"""

from gradpick.convert.tokens import (
    cmyk_string,
    hex_string,
    hsl_string,
    hsv_string,
    is_valid,
    to_cmyk,
    to_hex,
    to_hsl,
    to_hsv,
    to_rgba,
)

__all__ = [
    "to_rgba",
    "to_hsl",
    "to_hsv",
    "to_hex",
    "to_cmyk",
    "is_valid",
    "hsl_string",
    "hsv_string",
    "hex_string",
    "cmyk_string",
]
