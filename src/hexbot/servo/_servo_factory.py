"""Builds the servo arena from configuration, validating every calibration."""

from typing import List

from hexbot import constants
from hexbot.configuration import Config
from hexbot.labels import (
    ERR_SERVO_CONFIG_MIN_MAX_ORDER,
    ERR_SERVO_CONFIG_NEUTRAL_OUT_OF_RANGE,
    ERR_SERVO_CONFIG_OUT_OF_RANGE,
    ERR_SERVO_CONFIG_UNKNOWN_INDEX,
)
from hexbot.logger import Logger
from hexbot.servo._joint_type import JointType, Side
from hexbot.servo._pid import PidController
from hexbot.servo._servo import Position, Servo, ServoLimits
from hexbot.servo._servo_collection import ServoCollection

log = Logger().setup_logger('Servo factory')


class ServoFactory:
    """Factory for creating servo instances with proper initialization."""

    @staticmethod
    def _validate_servo_config(index: int, minimum: float, maximum: float, neutral: float) -> None:
        """Validate a servo's PWM calibration.

        Raises:
            ValueError: If validation fails.
        """
        for field_name, value in (('minimum', minimum), ('maximum', maximum)):
            if not constants.SERVO_PWM_MIN <= value <= constants.SERVO_PWM_MAX:
                raise ValueError(
                    ERR_SERVO_CONFIG_OUT_OF_RANGE.format(
                        index=index,
                        field=field_name,
                        value=value,
                        SERVO_PWM_MIN=constants.SERVO_PWM_MIN,
                        SERVO_PWM_MAX=constants.SERVO_PWM_MAX,
                    )
                )

        if minimum >= maximum:
            raise ValueError(ERR_SERVO_CONFIG_MIN_MAX_ORDER.format(index=index, minimum=minimum, maximum=maximum))

        if not minimum <= neutral <= maximum:
            raise ValueError(
                ERR_SERVO_CONFIG_NEUTRAL_OUT_OF_RANGE.format(
                    index=index, neutral=neutral, minimum=minimum, maximum=maximum
                )
            )

    @staticmethod
    def _side_of(index: int) -> Side:
        for shoulder, elbow in constants.LEFT_LEGS:
            if index in (shoulder, elbow):
                return Side.LEFT
        for shoulder, elbow in constants.RIGHT_LEGS:
            if index in (shoulder, elbow):
                return Side.RIGHT
        raise ValueError(ERR_SERVO_CONFIG_UNKNOWN_INDEX.format(index=index))

    @staticmethod
    def create(index: int, config: Config) -> Servo:
        """Create a servo at rest on its neutral position.

        Raises:
            ValueError: If the calibration is invalid or the index is not a leg servo.
        """
        servo_config = config.get_servo(index)
        pid_config = config.motion_controller.pid

        minimum = servo_config.minimum
        maximum = servo_config.maximum
        neutral = servo_config.neutral
        ServoFactory._validate_servo_config(index, minimum, maximum, neutral)

        return Servo(
            index=index,
            joint=JointType.from_index(index),
            side=ServoFactory._side_of(index),
            limits=ServoLimits(minimum=minimum, maximum=maximum, inverted=bool(servo_config.get('inverted', False))),
            pid=PidController(
                kp=pid_config.kp,
                ki=pid_config.ki,
                kd=pid_config.kd,
                integral_limit=pid_config.get('integral_limit'),
                output_limit=pid_config.get('output_limit'),
            ),
            position=Position.at_rest(neutral),
        )

    @staticmethod
    def create_collection(config: Config) -> ServoCollection:
        """Create every leg servo of the standard layout."""
        servos: List[Servo] = []
        for legs in (constants.LEFT_LEGS, constants.RIGHT_LEGS):
            for shoulder, elbow in legs:
                servos.append(ServoFactory.create(shoulder, config))
                servos.append(ServoFactory.create(elbow, config))

        collection = ServoCollection.from_layout(servos, constants.LEFT_LEGS, constants.RIGHT_LEGS)
        log.info('Created %d servos', len(collection))
        return collection
