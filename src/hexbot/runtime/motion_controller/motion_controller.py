import asyncio
import time
from dataclasses import replace
from typing import List, Optional, Protocol

from hexbot import constants, labels
from hexbot.errors import HardwareWriteFailure, ShutdownFailure, ValidationFailure
from hexbot.logger import Logger
from hexbot.runtime.messaging import InputMessage, MessageBus, MessageTopic, SettleFilterMessage, TickMessage
from hexbot.runtime.motion_controller.models import InputContext, State, TickContext
from hexbot.runtime.motion_controller.startup_ramp import StartupRamp
from hexbot.runtime.motion_controller.ticker import Ticker
from hexbot.runtime.motion_controller.transforms import step, tick

log = Logger().setup_logger('Motion controller')


class InputSource(Protocol):
    async def close(self) -> None: ...


class MotionController:
    """
    Owns the robot state and applies every change to it: input samples run
    the gesture pipeline, ticks run the settler and the startup ramp narrows
    which servos the settler may touch.

    Handlers are synchronous, so a pipeline run is never interleaved with
    another one. Producers only ever talk to the controller through the
    message bus.
    """

    def __init__(
        self,
        state: State,
        message_bus: MessageBus,
        ticker: Optional[Ticker] = None,
        ramp: Optional[StartupRamp] = None,
        input_source: Optional[InputSource] = None,
        drain_timeout: float = constants.SHUTDOWN_DRAIN_TIMEOUT,
        stats_interval: float = constants.LOOP_STATS_INTERVAL,
    ):
        if ramp is not None:
            # Nothing settles until the ramp activates it
            state = replace(state, settle_filter=frozenset())

        self._state = state
        self._message_bus = message_bus
        self._ticker = ticker if ticker is not None else Ticker(message_bus)
        self._ramp = ramp
        self._input_source = input_source
        self._drain_timeout = drain_timeout
        self._stats_interval = stats_interval

        self._consumers: List[asyncio.Task] = []
        self._ramp_task: Optional[asyncio.Task] = None
        self._shutdown_started = False
        self._stopped = asyncio.Event()

        self._stats_window_start = time.monotonic()
        self._tick_time_accumulator = 0.0
        self._tick_samples = 0

    @property
    def state(self) -> State:
        return self._state

    @property
    def is_stopped(self) -> bool:
        return self._stopped.is_set()

    def handle_input(self, message: InputMessage) -> None:
        context = InputContext(message.raw_input, self._state, message.time_since_last_input)
        try:
            self._state = step(context)
        except ValidationFailure as e:
            log.warning(labels.MOTION_INPUT_REJECTED, e)

    def handle_tick(self, message: TickMessage) -> None:
        try:
            self._state = tick(TickContext(self._state, message.time_since_last_tick))
        except HardwareWriteFailure as e:
            log.error(labels.MOTION_TICK_FAILED, e)

        self._record_tick(message.time_since_last_tick)

    def handle_settle_filter(self, message: SettleFilterMessage) -> None:
        self._state = replace(self._state, settle_filter=message.settle_filter)
        log.debug(labels.MOTION_SETTLE_FILTER, sorted(message.settle_filter) if message.settle_filter is not None else 'all')

    def _record_tick(self, elapsed: float) -> None:
        self._tick_time_accumulator += elapsed
        self._tick_samples += 1

        now = time.monotonic()
        if (now - self._stats_window_start) >= self._stats_interval and self._tick_samples > 0:
            avg_tick_interval = self._tick_time_accumulator / self._tick_samples
            avg_tick_frequency = 1.0 / avg_tick_interval if avg_tick_interval > 0 else 0.0
            log.info(labels.MOTION_LOOP_STATS, avg_tick_interval * 1000, avg_tick_frequency)
            self._stats_window_start = now
            self._tick_time_accumulator = 0.0
            self._tick_samples = 0

    async def _consume(self, topic: MessageTopic, handler) -> None:
        while True:
            message = await self._message_bus.get(topic)
            try:
                handler(message)
            except Exception:
                log.exception(labels.MOTION_HANDLER_FAILED, topic.value)

    def start(self) -> None:
        """Launch the consumers, the ticker and the startup ramp. Must run inside the event loop."""
        log.info(labels.MOTION_STARTING, len(self._state.servos))
        loop = asyncio.get_running_loop()

        self._consumers = [
            loop.create_task(self._consume(MessageTopic.SETTLE_FILTER, self.handle_settle_filter), name='settle-filter'),
            loop.create_task(self._consume(MessageTopic.INPUT, self.handle_input), name='input'),
            loop.create_task(self._consume(MessageTopic.TICK, self.handle_tick), name='tick'),
        ]
        self._ticker.start()

        if self._ramp is not None:
            self._ramp_task = loop.create_task(self._ramp.run(), name='startup-ramp')

    async def wait_stopped(self) -> None:
        await self._stopped.wait()

    async def shutdown(self) -> None:
        """
        Stop every producer and consumer, then release the PWM board.

        Safe to call more than once; later calls wait for the first one to
        finish. A failing board stop is logged and never raised.
        """
        if self._shutdown_started:
            log.debug(labels.MOTION_SHUTDOWN_IN_PROGRESS)
            await self._stopped.wait()
            return
        self._shutdown_started = True
        log.info(labels.MOTION_SHUTDOWN_STARTED)

        try:
            await self._stop_ramp()
            await self._ticker.stop()
            await self._drain_consumers()

            if self._input_source is not None:
                await self._input_source.close()

            self._stop_pwm()
        finally:
            self._stopped.set()
            log.info(labels.MOTION_TERMINATED)

    async def _stop_ramp(self) -> None:
        if self._ramp is None:
            return
        self._ramp.cancel()
        if self._ramp_task is not None and not self._ramp_task.done():
            self._ramp_task.cancel()
            try:
                await self._ramp_task
            except asyncio.CancelledError:
                pass

    async def _drain_consumers(self) -> None:
        if not self._consumers:
            return
        for consumer in self._consumers:
            consumer.cancel()
        _, pending = await asyncio.wait(self._consumers, timeout=self._drain_timeout)
        if pending:
            log.warning(labels.MOTION_DRAIN_TIMEOUT, len(pending))
        self._consumers = []

    def _stop_pwm(self) -> None:
        try:
            self._state.pwm.stop()
        except Exception as e:
            failure = ShutdownFailure(f'PWM stop failed: {e}')
            failure.__cause__ = e
            log.error(labels.MOTION_PWM_STOP_FAILED, failure)
            return
        log.info(labels.MOTION_PWM_STOPPED)
