"""
Process-wide robot state. Replaced as a whole on every pipeline run; only
the servo positions behind ``servos`` are shared and mutated in place.
"""

from dataclasses import dataclass
from typing import FrozenSet, Optional, Protocol

from hexbot import constants
from hexbot.servo import Servo, ServoCollection


class PwmDriver(Protocol):
    """Hardware interface consumed by the settler and the shutdown path."""

    def set_pwm(self, channel: int, on: int, off: int) -> None: ...

    def stop(self) -> None: ...


@dataclass(frozen=True)
class ButtonBindings:
    """Joystick button numbers of the gestures."""

    lean: int = constants.LEAN_BUTTON
    stand_up: int = constants.STAND_UP_BUTTON
    stand_down: int = constants.STAND_DOWN_BUTTON
    stand_reset: int = constants.STAND_RESET_BUTTON


@dataclass(frozen=True)
class State:
    pwm: PwmDriver
    servos: ServoCollection
    # level of the lean button on the last input
    leaned: bool = False
    # lean edge detector, set while leaning and cleared by the neutral reset
    lean_latched: bool = False
    # move edge detector
    moving: bool = False
    # stand posture in [-1, 1]
    height: float = 0.0
    # servo indices the settler may touch, None settles every servo
    settle_filter: Optional[FrozenSet[int]] = None
    bindings: ButtonBindings = ButtonBindings()

    def should_settle(self, servo: Servo) -> bool:
        return self.settle_filter is None or servo.index in self.settle_filter


def init(
    pwm: PwmDriver,
    servos: ServoCollection,
    settle_filter: Optional[FrozenSet[int]] = None,
    bindings: ButtonBindings = ButtonBindings(),
) -> State:
    """Initial state: every servo at rest, nothing leaned."""
    return State(pwm=pwm, servos=servos, settle_filter=settle_filter, bindings=bindings)
