"""
Input models: raw joystick samples as delivered by the remote controller and
their normalized form consumed by the gesture transforms.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable


@dataclass(frozen=True)
class RawJoystick:
    """One analog stick as raw Linux joystick axis values (-32767 to 32767)."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class RawAxes:
    left: RawJoystick = field(default_factory=RawJoystick)
    right: RawJoystick = field(default_factory=RawJoystick)


@dataclass(frozen=True)
class RawInput:
    """One input sample. ``buttons_pressed`` may contain duplicates."""

    axes: RawAxes = field(default_factory=RawAxes)
    buttons_pressed: Iterable[int] = ()


@dataclass(frozen=True)
class Joystick:
    """A stick sample augmented with its derived vector.

    x, y: components in [-1, 1], magnitude at most 1 (zero inside the deadzone)
    angle: direction in radians, counter-clockwise from stick right
    """

    raw: RawJoystick
    x: float
    y: float
    angle: float
    magnitude: float

    @property
    def is_active(self) -> bool:
        return self.magnitude > 0.0


@dataclass(frozen=True)
class Axes:
    left: Joystick
    right: Joystick


@dataclass(frozen=True)
class NormalizedInput:
    axes: Axes
    buttons_pressed: FrozenSet[int]

    def is_pressed(self, button: int) -> bool:
        return button in self.buttons_pressed
