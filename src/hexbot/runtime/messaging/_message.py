from dataclasses import dataclass
from typing import FrozenSet, Optional, Union

from hexbot.runtime.messaging._message_topic import MessageTopic
from hexbot.runtime.motion_controller.models.controller_input import RawInput


@dataclass(frozen=True)
class InputMessage:
    raw_input: RawInput
    time_since_last_input: float = 0.0


@dataclass(frozen=True)
class TickMessage:
    time_since_last_tick: float = 0.0


@dataclass(frozen=True)
class SettleFilterMessage:
    """``None`` lifts the restriction and settles every servo."""

    settle_filter: Optional[FrozenSet[int]]


MessagePayload = Union[InputMessage, TickMessage, SettleFilterMessage]

__all__ = ["InputMessage", "TickMessage", "SettleFilterMessage", "MessagePayload", "MessageTopic"]
