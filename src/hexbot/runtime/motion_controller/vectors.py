"""
Joystick vector derivation: raw stick sample to a bounded 2D vector.
"""

import math
from numbers import Real
from typing import NamedTuple

from hexbot import constants
from hexbot.errors import ValidationFailure
from hexbot.runtime.motion_controller.models import RawJoystick


class Vector(NamedTuple):
    x: float
    y: float
    angle: float
    magnitude: float


def _normalized_axis(value, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationFailure(f'Joystick {name} must be a number, got {value!r}')
    value = float(value)
    if not math.isfinite(value) or abs(value) > constants.AXIS_NORMALIZATION_CONSTANT + 1:
        raise ValidationFailure(f'Joystick {name} out of range: {value!r}')
    return value / constants.AXIS_NORMALIZATION_CONSTANT


def vector_from_joystick(joystick: RawJoystick, deadzone: float = constants.DEADZONE) -> Vector:
    """
    Convert a raw stick sample into a vector of magnitude at most 1.

    The Linux joystick y axis grows downwards, it is flipped so pushing the
    stick up gives a positive y. A radial deadzone removes stick drift and the
    remaining travel is rescaled so the output still reaches 1.

    Raises:
        ValidationFailure: If the sample is not numeric or out of range.
    """
    if joystick is None:
        raise ValidationFailure('Missing joystick sample')

    x = _normalized_axis(getattr(joystick, 'x', None), 'x')
    y = -_normalized_axis(getattr(joystick, 'y', None), 'y')

    magnitude = math.hypot(x, y)
    if magnitude <= deadzone:
        return Vector(0.0, 0.0, 0.0, 0.0)

    angle = math.atan2(y, x)
    magnitude = min(1.0, (magnitude - deadzone) / (1.0 - deadzone))

    return Vector(math.cos(angle) * magnitude, math.sin(angle) * magnitude, angle, magnitude)
