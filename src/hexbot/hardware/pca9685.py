"""
PCA9685 handler for controlling the PWM board on I2C.
"""

from adafruit_pca9685 import PCA9685 as _PCA9685  # type: ignore
from board import SCL, SDA  # type: ignore
import busio  # type: ignore

from hexbot import constants
from hexbot.logger import Logger

log = Logger().setup_logger('PCA9685')

CHANNEL_COUNT = 16


class PCA9685:
    """Drives the servos through the 16 channels of a PCA9685 board.

    Positions are written as raw 12-bit ``(on, off)`` counts, which is the
    unit the servo calibration is expressed in.

    Attributes
    ----------
    _i2c : busio.I2C
        I2C bus interface
    _pca9685 : PCA9685 or None
        PCA9685 board instance
    _address : int
        I2C address of the PCA9685 board
    _reference_clock_speed : int
        Reference clock speed for the PCA9685
    _frequency : int
        PWM frequency
    """

    def __init__(
        self,
        address: int = constants.PCA9685_ADDRESS,
        reference_clock_speed: int = constants.PCA9685_REFERENCE_CLOCK_SPEED,
        frequency: int = constants.PCA9685_FREQUENCY,
    ) -> None:
        self._i2c = busio.I2C(SCL, SDA)
        self._pca9685 = None
        self._address = address
        self._reference_clock_speed = reference_clock_speed
        self._frequency = frequency

    @classmethod
    def from_config(cls, pca9685_config) -> 'PCA9685':
        return cls(
            address=int(pca9685_config.address),
            reference_clock_speed=int(pca9685_config.reference_clock_speed),
            frequency=int(pca9685_config.frequency),
        )

    def activate_board(self) -> None:
        """Activate the PCA9685 board."""
        self._pca9685 = _PCA9685(self._i2c, address=self._address, reference_clock_speed=self._reference_clock_speed)
        self._pca9685.frequency = self._frequency
        log.info('PCA9685 at 0x%02x activated at %d Hz', self._address, self._frequency)

    def is_active(self) -> bool:
        return self._pca9685 is not None

    def set_pwm(self, channel: int, on: int, off: int) -> None:
        """Write the raw on/off counts of one channel.

        Raises
        ------
        RuntimeError
            If the board is not activated
        ValueError
            If the channel or counts are out of range
        """
        if self._pca9685 is None:
            raise RuntimeError('PCA9685 board not activated')
        if not 0 <= channel < CHANNEL_COUNT:
            raise ValueError(f'Invalid PCA9685 channel {channel}')
        if not (0 <= on < constants.PWM_RESOLUTION and 0 <= off < constants.PWM_RESOLUTION):
            raise ValueError(f'PWM counts out of range: on={on} off={off}')
        self._pca9685.pwm_regs[channel] = (on, off)

    def stop(self) -> None:
        """Turn every channel off, then release the board."""
        if self._pca9685 is None:
            return
        try:
            for channel in range(CHANNEL_COUNT):
                self._pca9685.pwm_regs[channel] = (0, 0)
        finally:
            self._pca9685.deinit()
            self._pca9685 = None
