import dataclasses

from hexbot.errors import ValidationFailure
from hexbot.runtime.motion_controller.models import (
    Axes,
    InputContext,
    Joystick,
    NormalizedInput,
    RawInput,
    RawJoystick,
)
from hexbot.runtime.motion_controller.vectors import vector_from_joystick


def normalize_input(context: InputContext) -> InputContext:
    """Turn the raw sample into stick vectors and a set of pressed buttons."""
    raw = context.input
    if not isinstance(raw, RawInput) or raw.axes is None or raw.buttons_pressed is None:
        raise ValidationFailure(f"Malformed input sample: {raw!r}")

    normalized = NormalizedInput(
        axes=Axes(
            left=vectorize_joystick(raw.axes.left),
            right=vectorize_joystick(raw.axes.right),
        ),
        buttons_pressed=frozenset(raw.buttons_pressed),
    )
    return dataclasses.replace(context, input=normalized)


def vectorize_joystick(joystick: RawJoystick) -> Joystick:
    vector = vector_from_joystick(joystick)
    return Joystick(raw=joystick, x=vector.x, y=vector.y, angle=vector.angle, magnitude=vector.magnitude)
