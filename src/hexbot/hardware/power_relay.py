"""
Servo power relay. The relay input is active low: HIGH cuts servo power.
"""

import time
from typing import Optional

import RPi.GPIO as GPIO  # type: ignore

from hexbot import labels
from hexbot.logger import Logger

log = Logger().setup_logger('Power relay')


class PowerRelay:
    """Switches servo power through a GPIO-driven relay."""

    def __init__(self, gpio_port: int):
        self._gpio_port = gpio_port
        self._initialized = False

    def initialize(self, max_retries: int = 10, retry_delay: float = 2.0) -> None:
        """Initialize GPIO with retry logic for systemd service startup.

        When running as a systemd service, GPIO may not be immediately accessible.
        Power is left off once initialized.
        """
        for attempt in range(1, max_retries + 1):
            try:
                log.info(labels.RELAY_ATTEMPTING_GPIO)
                GPIO.setmode(GPIO.BCM)
                GPIO.setup(self._gpio_port, GPIO.OUT)
                log.info(labels.RELAY_GPIO_SUCCESS)
                break
            except (RuntimeError, OSError) as e:
                if attempt == max_retries:
                    log.error(labels.RELAY_GPIO_ERROR)
                    raise
                log.warning(labels.RELAY_GPIO_WARNING, e)
                time.sleep(retry_delay)

        self._initialized = True
        self.power_off()

    def power_on(self) -> None:
        GPIO.output(self._gpio_port, GPIO.LOW)
        log.info(labels.RELAY_POWER_ON)

    def power_off(self) -> None:
        if not self._initialized:
            return
        GPIO.output(self._gpio_port, GPIO.HIGH)
        time.sleep(0.1)
        log.info(labels.RELAY_POWER_OFF)


def create_power_relay(gpio_port: Optional[int]) -> Optional[PowerRelay]:
    if gpio_port is None:
        return None
    relay = PowerRelay(int(gpio_port))
    relay.initialize()
    return relay
