"""
This module provides the AbortController class for handling shutdown signals.
"""

import asyncio
import signal
from typing import Awaitable, Callable, Iterable, Optional

from hexbot import labels
from hexbot.logger import Logger

log = Logger().setup_logger('Abort controller')

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class AbortController:
    """
    Turns SIGINT/SIGTERM into exactly one graceful shutdown.

    The first signal schedules ``shutdown`` on the event loop; signals received
    afterwards are logged and ignored.
    """

    def __init__(self, shutdown: Callable[[], Awaitable[None]], signals: Iterable[signal.Signals] = DEFAULT_SIGNALS):
        self._shutdown = shutdown
        self._signals = tuple(signals)
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._shutdown_task: Optional[asyncio.Task] = None

    @property
    def triggered(self) -> bool:
        return self._shutdown_task is not None

    def install(self) -> None:
        """Register the signal handlers on the running loop."""
        self._loop = asyncio.get_running_loop()
        for sig in self._signals:
            self._loop.add_signal_handler(sig, self.exit_gracefully, sig)

    def uninstall(self) -> None:
        if self._loop is None:
            return
        for sig in self._signals:
            self._loop.remove_signal_handler(sig)
        self._loop = None

    def exit_gracefully(self, signum: signal.Signals) -> None:
        name = signal.Signals(signum).name
        if self._shutdown_task is not None:
            log.info(labels.ABORT_SIGNAL_IGNORED, name)
            return

        log.info(labels.ABORT_SIGNAL_RECEIVED, name)
        loop = self._loop or asyncio.get_running_loop()
        self._shutdown_task = loop.create_task(self._shutdown(), name='shutdown')

    async def wait(self) -> None:
        """Wait for a triggered shutdown to complete."""
        if self._shutdown_task is not None:
            await self._shutdown_task
