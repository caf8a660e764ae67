# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""Exception types raised by gradpick."""


class GradpickError(Exception):
    """Base class for all gradpick errors."""


class ParseError(GradpickError, ValueError):
    """Text does not match the value grammar or holds an invalid color."""


class InvalidColorError(GradpickError, ValueError):
    """A constructed color is outside the valid channel ranges."""


class MinStopsViolation(GradpickError, ValueError):
    """An edit would leave a gradient with fewer than two stops."""


class OutOfRange(GradpickError, IndexError):
    """A stop index lies outside the gradient's stop list."""
