"""
Lean gesture: while the lean button is held the right stick repoints every
leg joint; releasing it sends the legs back to neutral exactly once.
"""

import dataclasses
from enum import Enum
from typing import Tuple

from hexbot.runtime.motion_controller.models import InputContext, State
from hexbot.servo import scale_axis_to_servo


class LeanEffect(Enum):
    TRACK = 'track'
    RESET = 'reset'
    NONE = 'none'


def lean_transition(latched: bool, pressed: bool) -> Tuple[bool, LeanEffect]:
    """Next value of the lean latch and the effect to apply to the legs."""
    if pressed:
        return True, LeanEffect.TRACK
    if latched:
        return False, LeanEffect.RESET
    return False, LeanEffect.NONE


def lean(context: InputContext) -> InputContext:
    state = context.state
    pressed = context.input.is_pressed(state.bindings.lean)
    latched, effect = lean_transition(state.lean_latched, pressed)

    if effect is LeanEffect.TRACK:
        stick = context.input.axes.right
        _track(state, stick.x, stick.y)
    elif effect is LeanEffect.RESET:
        for servo in state.servos.legs.all():
            servo.position.goal = servo.position.neutral

    return dataclasses.replace(
        context,
        state=dataclasses.replace(state, leaned=pressed, lean_latched=latched),
    )


def _track(state: State, x: float, y: float) -> None:
    legs = state.servos.legs

    for leg in legs.left:
        leg.elbow.position.goal = scale_axis_to_servo(-x, leg.elbow)
        leg.shoulder.position.goal = scale_axis_to_servo(y, leg.shoulder)

    # right legs are mounted mirrored
    for leg in legs.right:
        leg.elbow.position.goal = scale_axis_to_servo(-x, leg.elbow)
        leg.shoulder.position.goal = scale_axis_to_servo(-y, leg.shoulder)
