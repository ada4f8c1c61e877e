import unittest

from hexbot import constants
from hexbot.runtime.motion_controller.transforms import stand
from hexbot.servo import scale_axis_to_servo

from tests.fakes import BINDINGS, NEUTRAL, goals, input_context, make_state


class TestStand(unittest.TestCase):
    def test_stand_up_raises_height_at_fixed_rate(self):
        state = make_state()
        result = stand(input_context(state, buttons=(BINDINGS.stand_up,), dt=0.5)).state

        expected = constants.STAND_HEIGHT_RATE * 0.5
        self.assertAlmostEqual(result.height, expected)
        for leg in state.servos.legs.left + state.servos.legs.right:
            self.assertAlmostEqual(leg.elbow.position.goal, scale_axis_to_servo(expected, leg.elbow))
            self.assertEqual(leg.shoulder.position.goal, NEUTRAL)

    def test_height_is_clamped(self):
        state = make_state(height=0.9)
        result = stand(input_context(state, buttons=(BINDINGS.stand_up,), dt=10.0)).state
        self.assertEqual(result.height, 1.0)

        result = stand(input_context(result, buttons=(BINDINGS.stand_down,), dt=10.0)).state
        self.assertEqual(result.height, -1.0)

    def test_opposite_buttons_cancel(self):
        state = make_state(height=0.2)
        result = stand(input_context(state, buttons=(BINDINGS.stand_up, BINDINGS.stand_down), dt=1.0)).state
        self.assertAlmostEqual(result.height, 0.2)

    def test_reset_returns_to_default_posture(self):
        state = make_state(height=0.7)
        for servo in state.servos.all():
            servo.position.goal = 400
        result = stand(input_context(state, buttons=(BINDINGS.stand_reset, BINDINGS.stand_up), dt=1.0)).state

        self.assertEqual(result.height, 0.0)
        self.assertEqual(goals(state.servos.legs.all()), [NEUTRAL] * 12)

    def test_reset_keeps_lean_goals(self):
        state = make_state(leaned=True, height=0.6)
        for servo in state.servos.all():
            servo.position.goal = 400
        result = stand(input_context(state, buttons=(BINDINGS.stand_reset,), dt=0.1)).state

        self.assertEqual(result.height, 0.0)
        self.assertEqual(goals(state.servos.legs.all()), [400] * 12)

    def test_height_not_applied_while_moving(self):
        state = make_state(moving=True)
        result = stand(input_context(state, buttons=(BINDINGS.stand_down,), dt=1.0)).state

        self.assertLess(result.height, 0.0)
        self.assertEqual(goals(state.servos.legs.all()), [NEUTRAL] * 12)


if __name__ == "__main__":
    unittest.main()
