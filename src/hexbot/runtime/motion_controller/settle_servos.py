from hexbot.errors import HardwareWriteFailure
from hexbot.runtime.motion_controller.models import TickContext


def settle_servos(context: TickContext) -> TickContext:
    """
    Smoothly move servos towards their goal positions.

    Servos are visited in collection order. A servo's model is only updated
    once its PWM write succeeded; a failing write aborts the rest of the pass
    and leaves servos already written in their new position.

    Raises:
        HardwareWriteFailure: If the PWM board rejects a write.
    """
    state = context.state
    pwm = state.pwm

    for servo in state.servos.all():
        if not state.should_settle(servo):
            continue

        position = servo.position
        pid = servo.pid
        integral, last_error = pid.integral, pid.last_error

        error = position.goal - position.current
        target = servo.limits.clamp(position.current + pid.step(error))

        try:
            pwm.set_pwm(servo.index, 0, int(round(target)))
        except (OSError, RuntimeError, ValueError) as e:
            # Nothing moved, so the controller memory must not either
            pid.integral, pid.last_error = integral, last_error
            raise HardwareWriteFailure(servo.index, e) from e

        position.current = target

    return context
