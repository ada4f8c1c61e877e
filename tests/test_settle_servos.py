import unittest

from hexbot.errors import HardwareWriteFailure
from hexbot.runtime.motion_controller.models import TickContext
from hexbot.runtime.motion_controller.transforms import tick

from tests.fakes import MAXIMUM, NEUTRAL, FakePwm, make_servos, make_state


def currents(state):
    return [servo.position.current for servo in state.servos.all()]


class TestSettleServos(unittest.TestCase):
    def test_settled_servos_stay_put(self):
        pwm = FakePwm()
        state = make_state(pwm)
        for _ in range(2):
            state = tick(TickContext(state, 0.01))

        self.assertEqual(currents(state), [NEUTRAL] * 12)
        self.assertEqual(pwm.writes, [(index, 0, NEUTRAL) for index in range(12)] * 2)

    def test_converges_towards_goal(self):
        state = make_state()
        servo = state.servos.by_index(3)
        servo.position.goal = 400

        distances = []
        for _ in range(30):
            state = tick(TickContext(state, 0.01))
            distances.append(abs(servo.position.goal - servo.position.current))

        self.assertEqual(distances, sorted(distances, reverse=True))
        self.assertLess(distances[-1], 1.0)
        self.assertEqual(servo.position.goal, 400)

    def test_only_filtered_servos_are_written(self):
        pwm = FakePwm()
        state = make_state(pwm, settle_filter=frozenset({0, 2, 4}))
        for servo in state.servos.all():
            servo.position.goal = 400

        tick(TickContext(state, 0.01))

        self.assertEqual(pwm.channels_written(), [0, 2, 4])
        for servo in state.servos.all():
            if servo.index in (0, 2, 4):
                self.assertGreater(servo.position.current, NEUTRAL)
            else:
                self.assertEqual(servo.position.current, NEUTRAL)

    def test_empty_filter_settles_nothing(self):
        pwm = FakePwm()
        state = make_state(pwm, settle_filter=frozenset())
        state.servos.by_index(0).position.goal = 400
        tick(TickContext(state, 0.01))
        self.assertEqual(pwm.writes, [])

    def test_next_position_is_clamped(self):
        pwm = FakePwm()
        state = make_state(pwm, servos=make_servos(kp=10.0))
        servo = state.servos.by_index(0)
        servo.position.goal = MAXIMUM
        servo.position.current = MAXIMUM - 10

        tick(TickContext(state, 0.01))

        self.assertEqual(servo.position.current, MAXIMUM)
        self.assertEqual(pwm.last_values()[0], MAXIMUM)

    def test_write_failure_keeps_earlier_writes(self):
        pwm = FakePwm(failing_channels={5})
        state = make_state(pwm)
        for servo in state.servos.all():
            servo.position.goal = 400

        with self.assertRaises(HardwareWriteFailure) as raised:
            tick(TickContext(state, 0.01))

        self.assertEqual(raised.exception.servo_index, 5)
        self.assertIsInstance(raised.exception.__cause__, OSError)
        self.assertEqual(pwm.channels_written(), [0, 1, 2, 3, 4])
        for servo in state.servos.all():
            if servo.index < 5:
                self.assertGreater(servo.position.current, NEUTRAL)
            else:
                self.assertEqual(servo.position.current, NEUTRAL)

    def test_failed_write_leaves_pid_memory_untouched(self):
        pwm = FakePwm(failing_channels={0})
        state = make_state(pwm, servos=make_servos(ki=0.1, kd=0.1))
        servo = state.servos.by_index(0)
        servo.position.goal = 400

        with self.assertRaises(HardwareWriteFailure):
            tick(TickContext(state, 0.01))
        self.assertEqual(servo.pid.integral, 0.0)
        self.assertIsNone(servo.pid.last_error)

        # the retry behaves like a first step: 0.5 * 100 + 0.1 * 100, no derivative kick
        pwm.failing_channels = set()
        tick(TickContext(state, 0.01))
        self.assertAlmostEqual(servo.position.current, NEUTRAL + 60)


if __name__ == "__main__":
    unittest.main()
