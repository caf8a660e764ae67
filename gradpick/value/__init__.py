# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
Parse, edit and serialize color values.

Every operation is parse → transform → serialize. Nothing here keeps
state between calls.
"""

from gradpick.value.editor import (
    DEFAULT_STOP_POSITION,
    add_stop,
    delete_stop,
    move_stop,
    recolor_selected,
    select_stop,
    set_angle,
    set_kind,
)
from gradpick.value.parser import DEFAULT_LINEAR_ANGLE, parse_value
from gradpick.value.serializer import serialize_value

__all__ = [
    "parse_value",
    "serialize_value",
    "select_stop",
    "add_stop",
    "delete_stop",
    "move_stop",
    "recolor_selected",
    "set_kind",
    "set_angle",
    "DEFAULT_LINEAR_ANGLE",
    "DEFAULT_STOP_POSITION",
]
