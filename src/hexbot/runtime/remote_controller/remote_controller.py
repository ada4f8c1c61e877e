import asyncio
import time
from typing import Optional

from hexbot import labels
from hexbot.constants import DEVICE_SEARCH_INTERVAL, PUBLISH_RATE_HZ, READ_LOOP_SLEEP
from hexbot.logger import Logger
from hexbot.runtime.messaging import InputMessage, MessageBus, MessageTopic
from hexbot.runtime.motion_controller.models import RawInput

from .remote_control_service import RemoteControlService

log = Logger().setup_logger('Remote controller')


def is_idle(raw_input: RawInput) -> bool:
    """True when no button is held and both sticks report center."""
    axes = raw_input.axes
    return not tuple(raw_input.buttons_pressed) and not any(
        (axes.left.x, axes.left.y, axes.right.x, axes.right.y)
    )


class RemoteControllerController:
    """
    Publishes joystick samples to the motion controller.

    A sample is published whenever the joystick state changes, and the current
    sample is republished at ``publish_rate`` while a button is held or a stick
    is off-centre, so rate-based gestures see how long the input was held.
    When the device disconnects a neutral sample is published so no gesture
    stays held, and the device is searched for again every ``search_interval``
    seconds.
    """

    def __init__(
        self,
        message_bus: MessageBus,
        remote_control_service: RemoteControlService,
        read_interval: float = READ_LOOP_SLEEP,
        search_interval: float = DEVICE_SEARCH_INTERVAL,
        publish_rate: float = PUBLISH_RATE_HZ,
    ):
        self._message_bus = message_bus
        self._remote_control_service = remote_control_service
        self._read_interval = read_interval
        self._search_interval = search_interval
        self._publish_interval = 1.0 / publish_rate
        self._task: Optional[asyncio.Task] = None
        self._last_publish: Optional[float] = None
        self._next_publish_time = 0.0
        self._was_idle = True

    def start(self) -> None:
        if self._task is None:
            self._task = asyncio.get_running_loop().create_task(self._run(), name='remote-controller')

    async def close(self) -> None:
        """Stop reading and release the joystick device."""
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        self._remote_control_service.disconnect()
        log.info(labels.REMOTE_TERMINATED)

    def _publish(self, raw_input: RawInput) -> None:
        now = time.monotonic()
        elapsed = 0.0 if self._last_publish is None else now - self._last_publish
        self._last_publish = now
        self._next_publish_time = now + self._publish_interval
        # Last write wins: a sample the motion controller has not taken yet is stale
        self._message_bus.put_latest(MessageTopic.INPUT, InputMessage(raw_input, elapsed))

    def _update(self, changed: bool) -> None:
        raw_input = self._remote_control_service.raw_input()
        idle = is_idle(raw_input)

        if self._was_idle and not idle:
            # Held time starts at the press, not at the previous sample
            self._last_publish = None
        self._was_idle = idle

        if changed:
            self._publish(raw_input)
        elif not idle and time.monotonic() >= self._next_publish_time:
            next_publish_time = self._next_publish_time + self._publish_interval
            self._publish(raw_input)
            # Schedule next publish tick (avoids drift)
            if next_publish_time > time.monotonic():
                self._next_publish_time = next_publish_time

    async def _run(self) -> None:
        service = self._remote_control_service

        while True:
            if not service.is_connected:
                if not service.scan():
                    await asyncio.sleep(self._search_interval)
                    continue
                self._update(changed=True)

            try:
                changed = service.poll_events()
            except OSError:
                log.warning(labels.REMOTE_DISCONNECTED)
                service.clear()
                self._was_idle = True
                self._publish(RawInput())
                continue

            self._update(changed)
            await asyncio.sleep(self._read_interval)
