"""
Move gesture: the left stick shifts the body over the feet. Lean has
priority; when the stick returns to center the legs go back to neutral once.
"""

import dataclasses

from hexbot.runtime.motion_controller.models import InputContext
from hexbot.servo import scale_axis_to_servo


def move(context: InputContext) -> InputContext:
    state = context.state
    stick = context.input.axes.left
    active = stick.is_active and not state.leaned

    if active:
        legs = state.servos.legs
        for leg in legs.left:
            leg.shoulder.position.goal = scale_axis_to_servo(stick.y, leg.shoulder)
            leg.elbow.position.goal = scale_axis_to_servo(stick.x, leg.elbow)
        for leg in legs.right:
            leg.shoulder.position.goal = scale_axis_to_servo(-stick.y, leg.shoulder)
            leg.elbow.position.goal = scale_axis_to_servo(-stick.x, leg.elbow)
    elif state.moving and not state.leaned:
        for servo in state.servos.legs.all():
            servo.position.goal = servo.position.neutral

    # while leaning the lean release owns the neutral reset
    return dataclasses.replace(context, state=dataclasses.replace(state, moving=active))
