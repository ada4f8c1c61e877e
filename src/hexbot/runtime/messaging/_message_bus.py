import asyncio
from typing import Dict, Literal, overload

from hexbot.runtime.messaging._message import (
    InputMessage,
    MessagePayload,
    SettleFilterMessage,
    TickMessage,
)
from hexbot.runtime.messaging._message_topic import MessageTopic


class MessageBus:
    """
    Centralized holder for the channels between the producers (remote
    controller, ticker, startup ramp) and the motion controller.

    Queues are bound to the event loop running when they are first used, so
    a bus must be created per runtime rather than shared process-wide.
    """

    def __init__(self) -> None:
        self._queues: Dict[MessageTopic, asyncio.Queue] = {
            MessageTopic.INPUT: asyncio.Queue(1),
            MessageTopic.TICK: asyncio.Queue(1),
            MessageTopic.SETTLE_FILTER: asyncio.Queue(),
        }

    async def put(self, topic: MessageTopic, payload: MessagePayload) -> None:
        await self._queues[topic].put(payload)

    def put_nowait(self, topic: MessageTopic, payload: MessagePayload) -> None:
        self._queues[topic].put_nowait(payload)

    def put_latest(self, topic: MessageTopic, payload: MessagePayload) -> None:
        """Publish without blocking, replacing a pending message that was not consumed yet."""
        queue = self._queues[topic]
        while queue.full():
            queue.get_nowait()
        queue.put_nowait(payload)

    @overload
    async def get(self, topic: Literal[MessageTopic.INPUT]) -> InputMessage: ...
    @overload
    async def get(self, topic: Literal[MessageTopic.TICK]) -> TickMessage: ...
    @overload
    async def get(self, topic: Literal[MessageTopic.SETTLE_FILTER]) -> SettleFilterMessage: ...
    @overload
    async def get(self, topic: MessageTopic) -> MessagePayload: ...

    async def get(self, topic: MessageTopic) -> MessagePayload:
        """Wait for the next message on the given topic."""
        return await self._queues[topic].get()

    def get_nowait(self, topic: MessageTopic) -> MessagePayload:
        return self._queues[topic].get_nowait()

    def empty(self, topic: MessageTopic) -> bool:
        return self._queues[topic].empty()

    def clear(self) -> None:
        """Discard every pending message."""
        for queue in self._queues.values():
            while not queue.empty():
                queue.get_nowait()
