from hexbot.servo._servo import Servo


def scale_axis_to_servo(value: float, servo: Servo) -> float:
    """
    Map a normalized axis value in [-1, 1] to a goal position for ``servo``.

    0 maps to the servo's neutral position, +1 to the end of its range in the
    positive direction and -1 to the other end. Inverted servos swap ends, so
    the same axis value moves mirrored servos the same physical way.
    """
    value = max(-1.0, min(1.0, float(value)))
    if servo.limits.inverted:
        value = -value

    neutral = servo.position.neutral
    if value >= 0:
        goal = neutral + value * (servo.limits.maximum - neutral)
    else:
        goal = neutral + value * (neutral - servo.limits.minimum)

    return servo.limits.clamp(goal)
