"""Built-in configuration, overridden key by key by the user's JSON file."""

import copy
from typing import Any, Dict

from hexbot import constants


def _default_servos() -> Dict[str, Dict[str, Any]]:
    servos = {}
    for legs in (constants.LEFT_LEGS, constants.RIGHT_LEGS):
        for shoulder, elbow in legs:
            for index in (shoulder, elbow):
                servos[str(index)] = {
                    'minimum': constants.DEFAULT_SERVO_MIN,
                    'maximum': constants.DEFAULT_SERVO_MAX,
                    'neutral': constants.DEFAULT_SERVO_NEUTRAL,
                    'inverted': False,
                }
    return servos


DEFAULT_CONFIG: Dict[str, Any] = {
    'motion_controller': {
        'tick_interval': constants.TICK_INTERVAL,
        'pca9685': {
            'address': constants.PCA9685_ADDRESS,
            'reference_clock_speed': constants.PCA9685_REFERENCE_CLOCK_SPEED,
            'frequency': constants.PCA9685_FREQUENCY,
        },
        'power_relay': {
            'gpio_port': None,
        },
        'pid': {
            'kp': constants.PID_KP,
            'ki': constants.PID_KI,
            'kd': constants.PID_KD,
            'integral_limit': constants.PID_INTEGRAL_LIMIT,
            'output_limit': constants.PID_OUTPUT_LIMIT,
        },
        'startup_ramp': {
            'enabled': True,
            'settle_interval': constants.RAMP_SETTLE_INTERVAL,
            'group_pause': constants.RAMP_GROUP_PAUSE,
        },
        'servos': _default_servos(),
    },
    'remote_controller': {
        'device': constants.DEFAULT_DEVICE,
        'axes': {
            # Linux input axis codes, see remote_controller._mappings
            'left_x': 0x00,
            'left_y': 0x01,
            'right_x': 0x03,
            'right_y': 0x04,
        },
        'buttons': {
            'lean': constants.LEAN_BUTTON,
            'stand_up': constants.STAND_UP_BUTTON,
            'stand_down': constants.STAND_DOWN_BUTTON,
            'stand_reset': constants.STAND_RESET_BUTTON,
        },
    },
}


def merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
