"""
Input pipeline (normalize -> lean -> move -> stand) and the settling tick.

Every stage takes a context and returns a new one. A stage returning None
aborts the run and the caller keeps its previous state.
"""

from typing import Callable, Optional, Sequence, TypeVar

from hexbot.errors import ValidationFailure
from hexbot.runtime.motion_controller.models import InputContext, State, TickContext
from hexbot.runtime.motion_controller.settle_servos import settle_servos
from hexbot.runtime.motion_controller.transforms.lean import LeanEffect, lean, lean_transition
from hexbot.runtime.motion_controller.transforms.move import move
from hexbot.runtime.motion_controller.transforms.normalize_input import normalize_input
from hexbot.runtime.motion_controller.transforms.stand import stand

C = TypeVar('C', InputContext, TickContext)

INPUT_PIPELINE: Sequence[Callable[[InputContext], Optional[InputContext]]] = (
    normalize_input,
    lean,
    move,
    stand,
)

TICK_PIPELINE: Sequence[Callable[[TickContext], Optional[TickContext]]] = (settle_servos,)


def run_pipeline(stages: Sequence[Callable[[C], Optional[C]]], context: C) -> C:
    for stage in stages:
        result = stage(context)
        if result is None:
            raise ValidationFailure(f'{stage.__name__} produced no result')
        context = result
    return context


def step(context: InputContext) -> State:
    """Run the input pipeline and return the resulting state."""
    return run_pipeline(INPUT_PIPELINE, context).state


def tick(context: TickContext) -> State:
    """Run one settling pass and return the resulting state."""
    return run_pipeline(TICK_PIPELINE, context).state


__all__ = [
    'INPUT_PIPELINE',
    'TICK_PIPELINE',
    'LeanEffect',
    'lean',
    'lean_transition',
    'move',
    'normalize_input',
    'run_pipeline',
    'settle_servos',
    'stand',
    'step',
    'tick',
]
