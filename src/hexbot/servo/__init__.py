"""Servo model, PID controller and servo grouping."""

from hexbot.servo._calibration import scale_axis_to_servo
from hexbot.servo._joint_type import JointType, Side
from hexbot.servo._pid import PidController
from hexbot.servo._servo import Position, Servo, ServoLimits
from hexbot.servo._servo_collection import Leg, Legs, ServoCollection
from hexbot.servo._servo_factory import ServoFactory

__all__ = [
    "Servo",
    "Position",
    "ServoLimits",
    "PidController",
    "JointType",
    "Side",
    "Leg",
    "Legs",
    "ServoCollection",
    "ServoFactory",
    "scale_axis_to_servo",
]
