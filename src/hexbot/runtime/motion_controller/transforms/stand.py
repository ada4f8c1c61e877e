"""
Stand gesture: body height. Holding stand up/down raises or lowers the body
at a fixed rate, stand reset returns to the default posture.
"""

import dataclasses

from hexbot import constants
from hexbot.runtime.motion_controller.models import InputContext
from hexbot.servo import scale_axis_to_servo


def stand(context: InputContext) -> InputContext:
    state = context.state
    bindings = state.bindings
    is_pressed = context.input.is_pressed
    height = state.height

    if is_pressed(bindings.stand_reset):
        height = 0.0
        # lean has priority over the posture reset
        if not state.leaned:
            for servo in state.servos.legs.all():
                servo.position.goal = servo.position.neutral
    else:
        up = is_pressed(bindings.stand_up)
        down = is_pressed(bindings.stand_down)

        if up != down:
            direction = 1.0 if up else -1.0
            step = direction * constants.STAND_HEIGHT_RATE * max(0.0, context.time_since_last_input)
            height = max(-1.0, min(1.0, height + step))

        if (up or down) and not state.leaned and not state.moving:
            legs = state.servos.legs
            for leg in legs.left + legs.right:
                leg.elbow.position.goal = scale_axis_to_servo(height, leg.elbow)

    return dataclasses.replace(context, state=dataclasses.replace(state, height=height))
