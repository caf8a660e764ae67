# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""Configuration for a picker session."""

from __future__ import annotations

from dataclasses import dataclass

from gradpick.convert.tokens import is_valid
from gradpick.schema import Gradient
from gradpick.value.editor import DEFAULT_STOP_POSITION
from gradpick.value.parser import DEFAULT_LINEAR_ANGLE, parse_value


@dataclass(frozen=True)
class PickerConfig:
    """Configuration for a ColorPicker session."""

    # Value used by set_solid() when no color is given
    default_color: str = "rgba(175, 51, 242, 1)"

    # Value used by set_gradient() when no gradient is given
    default_gradient: str = (
        "linear-gradient(90deg, rgba(96,93,93,1) 0%, rgba(255,255,255,1) 100%)"
    )

    # Position for add_point() without a position (percent)
    default_stop_position: int = DEFAULT_STOP_POSITION

    # Angle set_linear() gives a radial gradient (degrees)
    default_linear_angle: int = DEFAULT_LINEAR_ANGLE

    # Recently committed colors kept per session
    history_size: int = 20

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not is_valid(self.default_color):
            raise ValueError(f"default_color is not a valid color: {self.default_color!r}")
        if not isinstance(parse_value(self.default_gradient), Gradient):
            raise ValueError(f"default_gradient is not a gradient: {self.default_gradient!r}")
        if not 0 <= self.default_stop_position <= 100:
            raise ValueError(
                f"default_stop_position must be 0-100, got {self.default_stop_position}"
            )
        if not 0 <= self.default_linear_angle <= 360:
            raise ValueError(
                f"default_linear_angle must be 0-360, got {self.default_linear_angle}"
            )
        if self.history_size < 1:
            raise ValueError(f"history_size must be >= 1, got {self.history_size}")
