from enum import Enum


class MessageTopic(Enum):
    INPUT = "input"
    TICK = "tick"
    SETTLE_FILTER = "settle_filter"
