# Copyright (c) 2026 Gradpick
# SPDX-License-Identifier: MIT

"""
ColorValue: structured form of a solid color or gradient value.

Design principles:
- Immutable: All types are frozen dataclasses
- Case-free: Stop selection is an explicit flag. Letter case is only an
  encoding used by the parser and serializer, never compared here.
- Rebuilt per call: Values are parsed fresh from text for every operation;
  edits return new instances.

Value shapes:
    Solid(color)
    Gradient(kind, stops, angle)

Ranges:
- RGB channels: integers 0-255
- Alpha: 0.0-1.0
- Stop position: integer percent 0-100
- Linear angle: integer degrees 0-360 (radial gradients carry none)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union

from gradpick.convert.colorspace import rgb255_to_hex
from gradpick.convert.tokens import normalize_alpha, rgba_token, to_rgba
from gradpick.errors import MinStopsViolation

MIN_STOPS = 2


# =============================================================================
# Color Token
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorToken:
    """
    A color as written in a value, plus its canonical RGBA quadruple.

    Equality and hashing use only r, g, b, a. Two tokens that differ only
    in syntax or letter case (``#FF0000`` vs ``rgb(255, 0, 0)``) are equal.

    Attributes:
        r, g, b: Channels (0-255)
        a: Alpha (0.0-1.0)
        text: Token text as written. Defaults to ``rgba(r, g, b, a)``, in
            which case alpha is rounded to 2 decimals to match the text.
    """
    r: int
    g: int
    b: int
    a: float = 1.0
    text: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        """Validate channel ranges and fill in canonical text."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be an integer 0-255, got {value!r}")
        if not 0.0 <= self.a <= 1.0:
            raise ValueError(f"Alpha must be 0-1, got {self.a}")
        if not self.text:
            object.__setattr__(self, "a", normalize_alpha(self.a))
            object.__setattr__(self, "text", rgba_token(self.r, self.g, self.b, self.a))

    @classmethod
    def parse(cls, text: str) -> ColorToken:
        """
        Build a token from text.

        Raises:
            InvalidColorError: If the text is not a valid color token
        """
        r, g, b, a = to_rgba(text)
        return cls(r=r, g=g, b=b, a=a, text=text.strip())

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: float = 1.0) -> ColorToken:
        """Build a token with canonical ``rgba(...)`` text; alpha kept to 2 decimals."""
        return cls(r=r, g=g, b=b, a=normalize_alpha(a))

    @property
    def rgba(self) -> tuple[int, int, int, float]:
        return (self.r, self.g, self.b, self.a)

    @property
    def hex(self) -> str:
        """Lower-case hex (alpha dropped), e.g. ``"#3941c8"``."""
        return rgb255_to_hex(self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.text


# =============================================================================
# Gradient Types
# =============================================================================


class GradientKind(Enum):
    """Gradient function name as written in CSS."""
    LINEAR = "linear-gradient"
    RADIAL = "radial-gradient"


@dataclass(frozen=True, slots=True)
class Stop:
    """
    A single stop in a gradient.

    Attributes:
        color: Color at this stop
        position: Integer percent along the gradient (0-100)
        selected: True for the stop currently targeted by channel edits
    """
    color: ColorToken
    position: int
    selected: bool = False

    def __post_init__(self) -> None:
        """Validate position is an integer in range."""
        if isinstance(self.position, bool) or not isinstance(self.position, int):
            raise ValueError(f"Position must be an integer, got {self.position!r}")
        if not 0 <= self.position <= 100:
            raise ValueError(f"Position must be 0-100, got {self.position}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "value": self.color.text.lower(),
            "left": self.position,
            "selected": self.selected,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Stop:
        """Deserialize from dictionary."""
        return cls(
            color=ColorToken.parse(data["value"]),
            position=data.get("left", 0),
            selected=data.get("selected", False),
        )


@dataclass(frozen=True, slots=True)
class Solid:
    """A single color with no gradient structure."""
    color: ColorToken

    @property
    def is_gradient(self) -> bool:
        return False

    @property
    def current_color(self) -> ColorToken:
        """The color channel edits act on."""
        return self.color

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "is_gradient": False,
            "gradient_type": None,
            "degrees": None,
            "colors": [{"value": self.color.text.lower()}],
        }


@dataclass(frozen=True, slots=True)
class Gradient:
    """
    A linear or radial gradient with ordered color stops.

    Stop order in ``stops`` is not significant; serialization sorts by
    position. Indices used by the stop editor refer to ``stops`` as stored.

    Attributes:
        kind: LINEAR or RADIAL
        stops: Tuple of stops (at least 2), exactly one selected
        angle: Degrees for LINEAR (0-360); must be None for RADIAL
    """
    kind: GradientKind
    stops: tuple[Stop, ...]
    angle: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate gradient structure."""
        if not isinstance(self.stops, tuple):
            object.__setattr__(self, "stops", tuple(self.stops))
        if len(self.stops) < MIN_STOPS:
            raise MinStopsViolation(
                f"Gradient must have at least {MIN_STOPS} stops, got {len(self.stops)}"
            )
        if self.kind == GradientKind.LINEAR:
            if self.angle is None or not 0 <= self.angle <= 360:
                raise ValueError(f"Linear gradient angle must be 0-360, got {self.angle}")
        elif self.angle is not None:
            raise ValueError("Radial gradients carry no angle")
        selected = sum(1 for s in self.stops if s.selected)
        if selected != 1:
            raise ValueError(f"Exactly one stop must be selected, got {selected}")

    @property
    def is_gradient(self) -> bool:
        return True

    @property
    def selected_index(self) -> int:
        """Index into ``stops`` of the selected stop."""
        return next(i for i, s in enumerate(self.stops) if s.selected)

    @property
    def selected_stop(self) -> Stop:
        return self.stops[self.selected_index]

    @property
    def current_color(self) -> ColorToken:
        """The color channel edits act on (the selected stop's)."""
        return self.selected_stop.color

    def sorted_stops(self) -> tuple[Stop, ...]:
        """Stops ascending by position; ties keep their stored order."""
        return tuple(sorted(self.stops, key=lambda s: s.position))

    def canonical(self) -> Gradient:
        """Same gradient with stops in serialized order."""
        return replace(self, stops=self.sorted_stops())

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        degrees = f"{self.angle}deg" if self.kind == GradientKind.LINEAR else "circle"
        return {
            "is_gradient": True,
            "gradient_type": self.kind.value,
            "degrees": degrees,
            "colors": [s.to_dict() for s in self.sorted_stops()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Gradient:
        """
        Deserialize from dictionary.

        ``degrees`` may be an int or ``"<n>deg"``; missing means 90. With no
        color marked ``selected`` the first one is, as in the parser.
        """
        kind = GradientKind(data["gradient_type"])
        angle = None
        if kind == GradientKind.LINEAR:
            degrees = data.get("degrees")
            if degrees is None:
                angle = 90
            elif isinstance(degrees, int) and not isinstance(degrees, bool):
                angle = degrees
            else:
                angle = int(str(degrees).strip().removesuffix("deg"))

        stops = [Stop.from_dict(c) for c in data["colors"]]
        marked = [i for i, s in enumerate(stops) if s.selected]
        selected = marked[0] if marked else 0
        return cls(
            kind=kind,
            stops=tuple(replace(s, selected=(i == selected)) for i, s in enumerate(stops)),
            angle=angle,
        )


ColorValue = Union[Solid, Gradient]


def value_from_dict(data: dict) -> ColorValue:
    """Deserialize either value shape from its dictionary form."""
    if data.get("is_gradient"):
        return Gradient.from_dict(data)
    return Solid(color=ColorToken.parse(data["colors"][0]["value"]))
