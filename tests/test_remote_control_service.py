import unittest

from hexbot.runtime.motion_controller.models import RawInput
from hexbot.runtime.remote_controller import JsEvent, RemoteControlService
from hexbot.runtime.remote_controller._mappings import AXIS_RX, AXIS_RY, AXIS_X, AXIS_Y, JS_EVENT_AXIS, JS_EVENT_BUTTON, JS_EVENT_INIT

AXES = {'left_x': AXIS_X, 'left_y': AXIS_Y, 'right_x': AXIS_RX, 'right_y': AXIS_RY}


class TestRemoteControlService(unittest.TestCase):
    def setUp(self):
        self.service = RemoteControlService('js0', AXES, device_path='/nonexistent')
        # device reports axes in this order: x, y, z, rx, ry
        self.service.axis_codes = [0x00, 0x01, 0x02, 0x03, 0x04]

    def test_neutral_until_events_arrive(self):
        self.assertEqual(self.service.raw_input(), RawInput())

    def test_axis_events_follow_driver_codes(self):
        self.assertTrue(self.service.apply_event(JsEvent(0, 1200, JS_EVENT_AXIS, 0)))
        self.assertTrue(self.service.apply_event(JsEvent(0, -500, JS_EVENT_AXIS, 4)))

        raw = self.service.raw_input()
        self.assertEqual((raw.axes.left.x, raw.axes.left.y), (1200, 0))
        self.assertEqual((raw.axes.right.x, raw.axes.right.y), (0, -500))

    def test_unmapped_axis_is_ignored(self):
        self.service.apply_event(JsEvent(0, 3000, JS_EVENT_AXIS, 2))
        self.assertEqual(self.service.raw_input(), RawInput())

    def test_repeated_value_is_not_a_change(self):
        self.service.apply_event(JsEvent(0, 100, JS_EVENT_AXIS, 1))
        self.assertFalse(self.service.apply_event(JsEvent(0, 100, JS_EVENT_AXIS, 1)))

    def test_buttons_pressed_and_released(self):
        self.assertTrue(self.service.apply_event(JsEvent(0, 1, JS_EVENT_BUTTON, 4)))
        self.assertTrue(self.service.apply_event(JsEvent(0, 1, JS_EVENT_BUTTON, 1)))
        self.assertEqual(tuple(self.service.raw_input().buttons_pressed), (1, 4))

        self.assertTrue(self.service.apply_event(JsEvent(0, 0, JS_EVENT_BUTTON, 4)))
        self.assertEqual(tuple(self.service.raw_input().buttons_pressed), (1,))

    def test_initial_state_events_are_applied(self):
        self.service.apply_event(JsEvent(0, 1, JS_EVENT_BUTTON | JS_EVENT_INIT, 3))
        self.assertEqual(tuple(self.service.raw_input().buttons_pressed), (3,))

    def test_clear_releases_everything(self):
        self.service.apply_event(JsEvent(0, 1, JS_EVENT_BUTTON, 4))
        self.service.apply_event(JsEvent(0, 9000, JS_EVENT_AXIS, 3))
        self.service.clear()
        self.assertEqual(self.service.raw_input(), RawInput())

    def test_scan_without_device_directory(self):
        self.assertFalse(self.service.scan())
        self.assertFalse(self.service.is_connected)


if __name__ == "__main__":
    unittest.main()
