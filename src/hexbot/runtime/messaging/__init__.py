from ._message import InputMessage, MessagePayload, SettleFilterMessage, TickMessage
from ._message_bus import MessageBus
from ._message_topic import MessageTopic

__all__ = ["MessageBus", "MessageTopic", "MessagePayload", "InputMessage", "TickMessage", "SettleFilterMessage"]
