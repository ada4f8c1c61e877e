"""
Queryable view over the servo set: all, odd/even, legs by side, by index.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from hexbot.servo._joint_type import JointType, Side
from hexbot.servo._servo import Servo


@dataclass(frozen=True)
class Leg:
    """Shoulder/elbow pair of one leg."""

    shoulder: Servo
    elbow: Servo

    def __iter__(self) -> Iterator[Servo]:
        yield self.shoulder
        yield self.elbow


class Legs:
    """Leg grouping by side of the body."""

    def __init__(self, left: Sequence[Leg], right: Sequence[Leg]):
        self._left: Tuple[Leg, ...] = tuple(left)
        self._right: Tuple[Leg, ...] = tuple(right)

    @property
    def left(self) -> Tuple[Leg, ...]:
        return self._left

    @property
    def right(self) -> Tuple[Leg, ...]:
        return self._right

    def all(self) -> List[Servo]:
        """Every leg servo, left legs first."""
        return [servo for leg in self._left + self._right for servo in leg]


class ServoCollection:
    """
    Read-only index into the servo arena. Iteration order is ascending index,
    the same on every run.
    """

    def __init__(self, servos: Iterable[Servo], legs: Legs):
        by_index: Dict[int, Servo] = {}
        for servo in servos:
            if servo.index in by_index:
                raise ValueError(f'Duplicate servo index {servo.index}')
            by_index[servo.index] = servo

        self._by_index = dict(sorted(by_index.items()))
        self._all: Tuple[Servo, ...] = tuple(self._by_index.values())
        self.legs = legs

    @classmethod
    def from_layout(
        cls,
        servos: Iterable[Servo],
        left_legs: Sequence[Tuple[int, int]],
        right_legs: Sequence[Tuple[int, int]],
    ) -> "ServoCollection":
        """Build the collection and its leg grouping from (shoulder, elbow) index pairs."""
        servos = list(servos)
        by_index = {servo.index: servo for servo in servos}

        def to_legs(pairs: Sequence[Tuple[int, int]]) -> List[Leg]:
            return [Leg(shoulder=by_index[shoulder], elbow=by_index[elbow]) for shoulder, elbow in pairs]

        return cls(servos, Legs(left=to_legs(left_legs), right=to_legs(right_legs)))

    def all(self) -> Tuple[Servo, ...]:
        return self._all

    def even(self) -> Tuple[Servo, ...]:
        """Servos on even channels (shoulders in the standard layout)."""
        return tuple(servo for servo in self._all if servo.index % 2 == 0)

    def odd(self) -> Tuple[Servo, ...]:
        return tuple(servo for servo in self._all if servo.index % 2 == 1)

    def by_index(self, index: int) -> Servo:
        return self._by_index[index]

    def by_side(self, side: Side) -> Tuple[Servo, ...]:
        return tuple(servo for servo in self._all if servo.side == side)

    def by_joint(self, joint: JointType) -> Tuple[Servo, ...]:
        return tuple(servo for servo in self._all if servo.joint == joint)

    def indices(self) -> Tuple[int, ...]:
        return tuple(self._by_index)

    def __len__(self) -> int:
        return len(self._all)

    def __iter__(self) -> Iterator[Servo]:
        return iter(self._all)
