import asyncio
import time
from typing import Optional

from hexbot import constants
from hexbot.runtime.messaging import MessageBus, MessageTopic, TickMessage


class Ticker:
    """
    Fixed-rate settling clock. Deadlines advance by the nominal interval so
    the rate does not drift, and each tick carries the measured time since
    the previous one.
    """

    def __init__(self, message_bus: MessageBus, interval: float = constants.TICK_INTERVAL):
        self._message_bus = message_bus
        self._interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name='ticker')

    async def stop(self) -> None:
        """Cancel the clock; no tick is published once this returns."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time() + self._interval
        last_tick = time.monotonic()

        while True:
            await asyncio.sleep(max(0.0, next_tick - loop.time()))

            now = time.monotonic()
            self._message_bus.put_latest(MessageTopic.TICK, TickMessage(time_since_last_tick=now - last_tick))
            last_tick = now

            # Schedule next tick (avoids drift), skipping deadlines already missed
            next_tick += self._interval
            if next_tick < loop.time():
                next_tick = loop.time() + self._interval
