from .context import InputContext, TickContext
from .controller_input import Axes, Joystick, NormalizedInput, RawAxes, RawInput, RawJoystick
from .robot_state import ButtonBindings, PwmDriver, State, init

__all__ = [
    "Axes",
    "ButtonBindings",
    "InputContext",
    "Joystick",
    "NormalizedInput",
    "PwmDriver",
    "RawAxes",
    "RawInput",
    "RawJoystick",
    "State",
    "TickContext",
    "init",
]
