"""hexbot: joystick-driven servo control for a six-legged walking robot."""

__version__ = '0.1.0'
