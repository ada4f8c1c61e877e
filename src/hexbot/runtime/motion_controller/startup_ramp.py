"""
Startup ramp: engage servos a few at a time so the inrush current of twelve
servos moving at once does not brown out the Raspberry Pi.
"""

import asyncio
import random
from typing import Iterable, List, Optional, Set

from hexbot import constants, labels
from hexbot.logger import Logger
from hexbot.runtime.messaging import MessageBus, MessageTopic, SettleFilterMessage

log = Logger().setup_logger('Startup ramp')


class StartupRamp:
    """
    Publishes a growing settle filter: shoulders (even channels) first in
    random order, then elbows (odd channels), and finally ``None`` to lift
    the restriction.
    """

    def __init__(
        self,
        indices: Iterable[int],
        message_bus: MessageBus,
        settle_interval: float = constants.RAMP_SETTLE_INTERVAL,
        group_pause: float = constants.RAMP_GROUP_PAUSE,
        rng: Optional[random.Random] = None,
    ):
        indices = sorted(set(indices))
        self._even = [index for index in indices if index % 2 == 0]
        self._odd = [index for index in indices if index % 2 == 1]
        self._message_bus = message_bus
        self._settle_interval = settle_interval
        self._group_pause = group_pause
        self._rng = rng or random.Random()
        self._cancelled = asyncio.Event()
        self._active: Set[int] = set()
        self._activation_order: List[int] = []

    @property
    def activation_order(self) -> List[int]:
        return list(self._activation_order)

    @property
    def total(self) -> int:
        return len(self._even) + len(self._odd)

    def cancel(self) -> None:
        """Stop activating servos at the next wait boundary."""
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    async def run(self) -> None:
        log.info(labels.RAMP_STARTING, len(self._even), len(self._odd))

        groups = [self._even, self._odd]
        for group_number, group in enumerate(groups):
            if group_number > 0 and not await self._wait(self._group_pause):
                return
            remaining = list(group)
            while remaining:
                if self.cancelled:
                    log.info(labels.RAMP_CANCELLED, len(self._active), self.total)
                    return
                index = remaining.pop(self._rng.randrange(len(remaining)))
                self._activate(index)
                if not await self._wait(self._settle_interval):
                    return

        self._publish(None)
        log.info(labels.RAMP_COMPLETE)

    def _activate(self, index: int) -> None:
        self._active.add(index)
        self._activation_order.append(index)
        self._publish(frozenset(self._active))
        log.debug(labels.RAMP_ACTIVATED, index, len(self._active), self.total)

    def _publish(self, settle_filter) -> None:
        self._message_bus.put_nowait(MessageTopic.SETTLE_FILTER, SettleFilterMessage(settle_filter))

    async def _wait(self, delay: float) -> bool:
        """Sleep, returning False when cancelled meanwhile."""
        await asyncio.sleep(delay)
        if self.cancelled:
            log.info(labels.RAMP_CANCELLED, len(self._active), self.total)
            return False
        return True
