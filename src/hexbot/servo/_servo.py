"""
Servo model: identity, calibration, PID controller and position triple.
"""

from dataclasses import dataclass

from hexbot.servo._joint_type import JointType, Side
from hexbot.servo._pid import PidController


@dataclass
class Position:
    """Positions in PWM OFF counts.

    current: last value written to the board (owned by the settler)
    goal: target set by the gesture transforms
    neutral: rest value
    """

    current: float
    goal: float
    neutral: float

    @classmethod
    def at_rest(cls, neutral: float) -> "Position":
        return cls(current=neutral, goal=neutral, neutral=neutral)


@dataclass(frozen=True)
class ServoLimits:
    """Per-servo calibration: valid PWM range and mounting direction."""

    minimum: float
    maximum: float
    inverted: bool = False

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, value))

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


@dataclass(eq=False)
class Servo:
    """
    One leg actuator. The same instance lives for the whole run and is
    mutated in place by the transforms (goal) and the settler (current).
    """

    index: int
    joint: JointType
    side: Side
    limits: ServoLimits
    pid: PidController
    position: Position

    def __post_init__(self):
        for name in ('current', 'goal', 'neutral'):
            value = getattr(self.position, name)
            if not self.limits.contains(value):
                raise ValueError(
                    f'Servo {self.index}: {name} position {value} outside [{self.limits.minimum}, {self.limits.maximum}]'
                )

    def __repr__(self) -> str:
        return f"Servo(index={self.index}, joint={self.joint.value}, side={self.side.value}, position={self.position})"
