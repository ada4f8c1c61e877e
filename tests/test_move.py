import unittest

from hexbot.runtime.motion_controller.transforms import move
from hexbot.servo import scale_axis_to_servo

from tests.fakes import NEUTRAL, goals, input_context, make_state, stick


class TestMove(unittest.TestCase):
    def setUp(self):
        self.state = make_state()
        self.legs = self.state.servos.legs

    def test_left_stick_moves_legs_mirrored(self):
        state = move(input_context(self.state, left=stick(0.4, 0.6))).state

        self.assertTrue(state.moving)
        for leg in self.legs.left:
            self.assertAlmostEqual(leg.shoulder.position.goal, scale_axis_to_servo(0.6, leg.shoulder))
            self.assertAlmostEqual(leg.elbow.position.goal, scale_axis_to_servo(0.4, leg.elbow))
        for leg in self.legs.right:
            self.assertAlmostEqual(leg.shoulder.position.goal, scale_axis_to_servo(-0.6, leg.shoulder))
            self.assertAlmostEqual(leg.elbow.position.goal, scale_axis_to_servo(-0.4, leg.elbow))

    def test_release_resets_to_neutral(self):
        state = move(input_context(self.state, left=stick(1.0, 0.0))).state
        state = move(input_context(state, left=stick())).state

        self.assertFalse(state.moving)
        self.assertEqual(goals(self.legs.all()), [NEUTRAL] * 12)

    def test_idle_stick_leaves_goals_alone(self):
        self.legs.left[0].elbow.position.goal = 200
        state = move(input_context(self.state, left=stick())).state
        self.assertFalse(state.moving)
        self.assertEqual(self.legs.left[0].elbow.position.goal, 200)

    def test_lean_has_priority(self):
        state = make_state(leaned=True)
        legs = state.servos.legs
        result = move(input_context(state, left=stick(1.0, 1.0))).state

        self.assertFalse(result.moving)
        self.assertEqual(goals(legs.all()), [NEUTRAL] * 12)

    def test_no_reset_while_leaned(self):
        state = make_state(leaned=True, moving=True)
        legs = state.servos.legs
        legs.right[1].shoulder.position.goal = 420
        result = move(input_context(state, left=stick())).state

        self.assertFalse(result.moving)
        self.assertEqual(legs.right[1].shoulder.position.goal, 420)


if __name__ == "__main__":
    unittest.main()
