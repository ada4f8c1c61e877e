from dataclasses import dataclass
from typing import Union

from hexbot.runtime.motion_controller.models.controller_input import NormalizedInput, RawInput
from hexbot.runtime.motion_controller.models.robot_state import State


@dataclass(frozen=True)
class InputContext:
    """Envelope threaded through one run of the input pipeline."""

    input: Union[RawInput, NormalizedInput]
    state: State
    # seconds
    time_since_last_input: float = 0.0


@dataclass(frozen=True)
class TickContext:
    """Envelope threaded through one settling tick."""

    state: State
    # seconds
    time_since_last_tick: float = 0.0
