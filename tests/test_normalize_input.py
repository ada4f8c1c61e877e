import math
import unittest

from hexbot import constants
from hexbot.errors import ValidationFailure
from hexbot.runtime.motion_controller.models import InputContext, NormalizedInput, RawAxes, RawInput, RawJoystick
from hexbot.runtime.motion_controller.transforms import normalize_input
from hexbot.runtime.motion_controller.vectors import vector_from_joystick

from tests.fakes import make_state

FULL = constants.AXIS_NORMALIZATION_CONSTANT


class TestVectorFromJoystick(unittest.TestCase):
    def test_centered_stick_is_zero(self):
        self.assertEqual(vector_from_joystick(RawJoystick(0, 0)).magnitude, 0.0)

    def test_deadzone_removes_drift(self):
        drift = int(FULL * constants.DEADZONE / 2)
        vector = vector_from_joystick(RawJoystick(drift, -drift))
        self.assertEqual((vector.x, vector.y, vector.magnitude), (0.0, 0.0, 0.0))

    def test_stick_up_is_positive_y(self):
        vector = vector_from_joystick(RawJoystick(0, -FULL))
        self.assertAlmostEqual(vector.y, 1.0)
        self.assertAlmostEqual(vector.x, 0.0)
        self.assertAlmostEqual(vector.angle, math.pi / 2)

    def test_magnitude_never_exceeds_one(self):
        vector = vector_from_joystick(RawJoystick(FULL, FULL))
        self.assertAlmostEqual(vector.magnitude, 1.0)
        self.assertAlmostEqual(math.hypot(vector.x, vector.y), 1.0)

    def test_malformed_samples_rejected(self):
        for joystick in (None, RawJoystick('a', 0), RawJoystick(0, float('nan')), RawJoystick(FULL * 2, 0)):
            with self.subTest(joystick=joystick):
                with self.assertRaises(ValidationFailure):
                    vector_from_joystick(joystick)


class TestNormalizeInput(unittest.TestCase):
    def test_builds_normalized_input(self):
        raw = RawInput(RawAxes(left=RawJoystick(FULL, 0)), buttons_pressed=(4, 4, 1))
        context = normalize_input(InputContext(raw, make_state()))

        self.assertIsInstance(context.input, NormalizedInput)
        self.assertEqual(context.input.buttons_pressed, frozenset({1, 4}))
        self.assertAlmostEqual(context.input.axes.left.x, 1.0)
        self.assertEqual(context.input.axes.right.magnitude, 0.0)
        self.assertIs(context.input.axes.left.raw, raw.axes.left)

    def test_state_is_untouched(self):
        state = make_state()
        context = normalize_input(InputContext(RawInput(), state))
        self.assertIs(context.state, state)

    def test_missing_axes_rejected(self):
        with self.assertRaises(ValidationFailure):
            normalize_input(InputContext(RawInput(axes=None), make_state()))


if __name__ == "__main__":
    unittest.main()
