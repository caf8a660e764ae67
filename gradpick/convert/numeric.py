# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Numeric helpers shared by the converter, parser and picker session.

Rounding is half-up (``round_half_up(0.5) == 1``), not Python's
round-half-even, so channel values match what CSS tooling reports.
"""

from __future__ import annotations

import math


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positives."""
    return int(math.floor(value + 0.5))


def round_places(value: float, places: int = 2) -> float:
    """Round to ``places`` decimals, half-up."""
    factor = 10 ** places
    return math.floor(value * factor + 0.5) / factor


def format_number(value: float, places: int = 2) -> str:
    """
    Format a number without trailing zeros.

    Examples:
        >>> format_number(1.0)
        '1'
        >>> format_number(0.456)
        '0.46'
    """
    text = f"{round_places(value, places):.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def clamp_int(value: float, lo: int, hi: int) -> int:
    """
    Round half-up and clamp to an integer range.

    NaN maps to ``lo``; infinities map to the nearer bound.
    """
    if value is None or math.isnan(value):
        return lo
    if math.isinf(value):
        return hi if value > 0 else lo
    return int(clamp(round_half_up(value), lo, hi))


def is_number(value: object) -> bool:
    """True for finite ints/floats (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


# =============================================================================
# Case as a flag
# =============================================================================


def is_upper_token(text: str) -> bool:
    """
    True if the token carries the upper-case marker.

    A token is upper-case when it has at least one cased letter and none of
    them is lower-case. Letterless tokens such as ``#000000`` are neither.
    """
    has_cased = False
    for ch in text:
        if ch.islower():
            return False
        if ch.isupper():
            has_cased = True
    return has_cased


def has_cased_letters(text: str) -> bool:
    """True if ``text`` contains at least one letter that has a case."""
    return any(ch.isupper() or ch.islower() for ch in text)


def apply_case(text: str, upper: bool) -> str:
    """Render ``text`` upper-case when ``upper`` is set, lower-case otherwise."""
    return text.upper() if upper else text.lower()
