"""
Joystick device access: discovery, axis/button mapping and event parsing.

The service owns no event loop; the remote controller polls it and decides
when to publish.
"""

import array
import os
import struct
from dataclasses import dataclass
from fcntl import ioctl
from typing import BinaryIO, Dict, List, Mapping, Optional, Set

from hexbot import labels
from hexbot.constants import (
    DEVICE_PATH,
    JSDEV_READ_SIZE,
    JSIOCGAXES,
    JSIOCGAXMAP,
    JSIOCGBTNMAP,
    JSIOCGBUTTONS,
    JSIOCGNAME,
)
from hexbot.logger import Logger
from hexbot.runtime.motion_controller.models import RawAxes, RawInput, RawJoystick

from ._mappings import DRIVER_CODE_NAMES, JS_EVENT_AXIS, JS_EVENT_BUTTON, JS_EVENT_INIT


@dataclass
class JsEvent:
    """Represents a single event from a Linux joystick device."""

    time: int  # Event timestamp (ms)
    value: int  # Value (-32767–32767 for axes, 0/1 for buttons)
    event_type: int  # Event type bitmask (JS_EVENT_AXIS, JS_EVENT_BUTTON, etc.)
    number: int  # Axis or button index


log = Logger().setup_logger('Remote Control Service')


class RemoteControlService:
    """
    Service for managing the joystick device connection and tracking its state.

    Axes are looked up by the driver code the device reports for them, so the
    configured ``axes`` mapping (``left_x``, ``left_y``, ``right_x``,
    ``right_y``) is independent of the order a particular gamepad uses.
    Buttons are reported by their button number.
    """

    def __init__(self, device_name: str, axes: Mapping[str, int], device_path: str = DEVICE_PATH):
        self.device_name = device_name
        self.device_path = device_path
        self.jsdev: Optional[BinaryIO] = None
        self.is_connected = False
        self.axis_codes: List[int] = []
        self.button_codes: List[int] = []
        self._axes_config = dict(axes)
        self._axis_values: Dict[int, int] = {}
        self._buttons_pressed: Set[int] = set()

    def scan(self) -> bool:
        """
        Scan the input directory for the configured joystick device and try to open it.

        Returns:
            True if the device was found and opened, False otherwise.
        """
        log.info(labels.REMOTE_LOOKING_FOR_DEVICES.format(self.device_name))
        self.is_connected = False
        self.jsdev = None

        try:
            entries = os.listdir(self.device_path)
        except OSError as e:
            log.warning(labels.REMOTE_OPEN_WARNING.format(self.device_path, e))
            return False

        if self.device_name in entries:
            return self._open_device(f'{self.device_path}/{self.device_name}')
        return False

    def _open_device(self, device_file: str) -> bool:
        try:
            log.debug(labels.REMOTE_ATTEMPTING_OPEN.format(device_file))
            self.jsdev = open(device_file, 'rb')
            os.set_blocking(self.jsdev.fileno(), False)
            log.info(labels.REMOTE_OPEN_SUCCESS.format(device_file))
        except OSError as e:
            log.warning(labels.REMOTE_OPEN_WARNING.format(device_file, e))
            return False

        try:
            self._initialize_device_mappings()
        except OSError as e:
            log.error(labels.REMOTE_INIT_MAPPING_ERROR.format(e))
            self.disconnect()
            return False

        self.clear()
        self.is_connected = True
        return True

    def _initialize_device_mappings(self) -> None:
        """Query the joystick device for its name, axis map and button map."""
        buf = array.array('B', [0] * 64)
        ioctl(self.jsdev, JSIOCGNAME + (0x10000 * len(buf)), buf)  # type: ignore
        js_name = buf.tobytes().rstrip(b'\x00').decode('utf-8', errors='replace')
        log.info(labels.REMOTE_CONNECTED, js_name)

        buf = array.array('B', [0])
        ioctl(self.jsdev, JSIOCGAXES, buf)  # type: ignore
        num_axes = buf[0]

        buf = array.array('B', [0])
        ioctl(self.jsdev, JSIOCGBUTTONS, buf)  # type: ignore
        num_buttons = buf[0]

        buf = array.array('B', [0] * 0x40)
        ioctl(self.jsdev, JSIOCGAXMAP, buf)  # type: ignore
        self.axis_codes = list(buf[:num_axes])

        buf = array.array('H', [0] * 200)
        ioctl(self.jsdev, JSIOCGBTNMAP, buf)  # type: ignore
        self.button_codes = list(buf[:num_buttons])

        log.info(
            labels.REMOTE_AXES_FOUND.format(
                num_axes,
                ", ".join(DRIVER_CODE_NAMES.get(axis, f'unknown(0x{axis:02x})') for axis in self.axis_codes),
            )
        )
        log.info(
            labels.REMOTE_BUTTONS_FOUND.format(
                num_buttons,
                ", ".join(DRIVER_CODE_NAMES.get(btn, f'unknown(0x{btn:03x})') for btn in self.button_codes),
            )
        )

    def poll_events(self) -> bool:
        """
        Read every event currently buffered by the device.

        Returns:
            True if the joystick state changed.

        Raises:
            OSError: If the device went away; the connection is closed first.
        """
        if not self.is_connected or self.jsdev is None:
            return False

        changed = False
        try:
            while True:
                evbuf = self.jsdev.read(JSDEV_READ_SIZE)
                if not evbuf:
                    break
                changed = self.apply_event(JsEvent(*struct.unpack('IhBB', evbuf))) or changed
        except OSError as e:
            log.error(labels.REMOTE_READ_ERROR.format(e))
            self.disconnect()
            raise

        return changed

    def apply_event(self, event: JsEvent) -> bool:
        """Fold one device event into the tracked state, returning whether it changed."""
        # Synthetic initial-state events are folded in too, so a stick held
        # while connecting is not reported as centered
        event_type = event.event_type & ~JS_EVENT_INIT

        if event_type & JS_EVENT_BUTTON:
            was_pressed = event.number in self._buttons_pressed
            if event.value:
                self._buttons_pressed.add(event.number)
            else:
                self._buttons_pressed.discard(event.number)
            return was_pressed != bool(event.value)

        if event_type & JS_EVENT_AXIS and event.number < len(self.axis_codes):
            driver_code = self.axis_codes[event.number]
            if self._axis_values.get(driver_code, 0) == event.value:
                return False
            self._axis_values[driver_code] = event.value
            return True

        return False

    def _axis(self, name: str) -> int:
        return self._axis_values.get(self._axes_config[name], 0)

    def raw_input(self) -> RawInput:
        """Snapshot of the current joystick state."""
        return RawInput(
            axes=RawAxes(
                left=RawJoystick(self._axis('left_x'), self._axis('left_y')),
                right=RawJoystick(self._axis('right_x'), self._axis('right_y')),
            ),
            buttons_pressed=tuple(sorted(self._buttons_pressed)),
        )

    def clear(self) -> None:
        """Reset to neutral sticks and no buttons pressed."""
        self._axis_values = {}
        self._buttons_pressed = set()

    def disconnect(self) -> None:
        """Close the device connection if open."""
        if self.jsdev:
            try:
                self.jsdev.close()
            except OSError as e:
                log.warning(labels.REMOTE_CLOSE_WARNING.format(e))
            finally:
                self.jsdev = None
        self.is_connected = False
