"""Error taxonomy shared by the motion pipeline and the runtime."""


class ValidationFailure(ValueError):
    """A pipeline stage produced no result or its input was malformed."""


class HardwareWriteFailure(RuntimeError):
    """Writing a servo position to the PWM board failed during a tick."""

    def __init__(self, servo_index: int, cause: BaseException):
        super().__init__(f'PWM write failed for servo {servo_index}: {cause}')
        self.servo_index = servo_index
        self.cause = cause


class ShutdownFailure(RuntimeError):
    """Stopping the PWM board failed during shutdown."""


__all__ = [
    'ValidationFailure',
    'HardwareWriteFailure',
    'ShutdownFailure',
]
