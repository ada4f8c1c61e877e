from enum import Enum


class JointType(Enum):
    """Different types of joints in the robot."""

    SHOULDER = "shoulder"
    ELBOW = "elbow"

    @staticmethod
    def from_index(index: int) -> "JointType":
        """
        Determine the JointType from a PWM channel index.

        Even channels drive shoulders, odd channels drive elbows.
        """
        return JointType.SHOULDER if index % 2 == 0 else JointType.ELBOW


class Side(Enum):
    """Side of the body a leg is mounted on."""

    LEFT = "left"
    RIGHT = "right"
