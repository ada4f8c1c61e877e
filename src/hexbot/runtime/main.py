#!/usr/bin/env python3

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from hexbot import labels
from hexbot.configuration import Config
from hexbot.logger import Logger
from hexbot.runtime.abort_controller import AbortController
from hexbot.runtime.messaging import MessageBus
from hexbot.runtime.motion_controller.models import ButtonBindings, init
from hexbot.runtime.motion_controller.motion_controller import MotionController
from hexbot.runtime.motion_controller.startup_ramp import StartupRamp
from hexbot.runtime.motion_controller.ticker import Ticker
from hexbot.runtime.remote_controller import RemoteControllerController, RemoteControlService
from hexbot.servo import ServoCollection, ServoFactory

log = Logger().setup_logger(enable_stream_handler=True)


def bindings_from_config(config: Config) -> ButtonBindings:
    buttons = config.remote_controller.buttons
    return ButtonBindings(
        lean=int(buttons.lean),
        stand_up=int(buttons.stand_up),
        stand_down=int(buttons.stand_down),
        stand_reset=int(buttons.stand_reset),
    )


async def run(config: Config, servos: ServoCollection, ramp_enabled: bool = True) -> None:
    # Hardware drivers need the board libraries, only import them on the robot
    from hexbot.hardware.pca9685 import PCA9685
    from hexbot.hardware.power_relay import create_power_relay

    motion_config = config.motion_controller

    pwm = PCA9685.from_config(motion_config.pca9685)
    pwm.activate_board()
    relay = create_power_relay(motion_config.power_relay.gpio_port)

    message_bus = MessageBus()

    remote_config = config.remote_controller
    remote_controller = RemoteControllerController(
        message_bus,
        RemoteControlService(remote_config.device, remote_config.axes.to_dict()),
    )

    ramp = None
    ramp_config = motion_config.startup_ramp
    if ramp_enabled and ramp_config.enabled:
        ramp = StartupRamp(
            servos.indices(),
            message_bus,
            settle_interval=ramp_config.settle_interval,
            group_pause=ramp_config.group_pause,
        )

    controller = MotionController(
        init(pwm, servos, bindings=bindings_from_config(config)),
        message_bus,
        ticker=Ticker(message_bus, motion_config.tick_interval),
        ramp=ramp,
        input_source=remote_controller,
    )

    abort_controller = AbortController(controller.shutdown)
    abort_controller.install()

    try:
        if relay is not None:
            relay.power_on()
        controller.start()
        remote_controller.start()
        log.info(labels.MAIN_RUNNING)

        await controller.wait_stopped()
    finally:
        abort_controller.uninstall()
        if not controller.is_stopped:
            await controller.shutdown()
        if relay is not None:
            relay.power_off()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Hexbot Runtime')
    parser.add_argument('--config', help='Path of the JSON configuration file')
    parser.add_argument('--skip-ramp', action='store_true', help='Settle every servo immediately at startup')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level',
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    Logger().set_level(getattr(logging, args.log_level))

    log.info(labels.MAIN_STARTING)

    try:
        config = Config(args.config)
        # Fail fast on a bad calibration before touching the hardware
        servos = ServoFactory.create_collection(config)
    except ValueError as e:
        log.error(labels.MAIN_CONFIG_ERROR, e)
        return 1

    try:
        asyncio.run(run(config, servos, ramp_enabled=not args.skip_ramp))
    except (OSError, RuntimeError) as e:
        log.error(labels.MAIN_HARDWARE_ERROR, e)
        return 1

    log.info(labels.MAIN_TERMINATED)
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == '__main__':
    cli()
