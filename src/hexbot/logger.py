"""
This module provides logging functionality for the hexbot runtime.
"""

import logging
from pathlib import Path

from hexbot.singleton import Singleton

HEXBOT = 'Hexbot'


class Logger(metaclass=Singleton):
    """A singleton logger class for setting up logging handlers."""

    def __init__(self, logs_folder: str = 'logs/'):
        """Initialize the logger with file and stream handlers."""
        Path(logs_folder).mkdir(parents=True, exist_ok=True)

        # create file handler which logs even debug messages
        self.logging_file_handler = logging.FileHandler(str(Path(logs_folder) / (HEXBOT + '.log')))

        # create console handler
        self.logging_stream_handler = logging.StreamHandler()

        # create formatter and add it to the handlers
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.logging_file_handler.setFormatter(formatter)
        self.logging_stream_handler.setFormatter(formatter)

        self._level = logging.INFO

    def set_level(self, level: int) -> None:
        """Change the level of every hexbot logger created so far and from now on."""
        self._level = level
        for name in list(logging.root.manager.loggerDict):
            if name.startswith(HEXBOT):
                logging.getLogger(name).setLevel(level)

    def setup_logger(self, logger_name=None, enable_stream_handler=False):
        """Set up a logger with the given name and return it.

        Args:
            logger_name (str, optional): Name of the logger. Defaults to None.
            enable_stream_handler (bool): Whether to add the stream handler for console output. Defaults to False.

        Returns:
            logging.Logger: The configured logger.
        """
        if not logger_name:
            logger_name = HEXBOT
        else:
            logger_name = HEXBOT + ' ' + logger_name

        logger = logging.getLogger(f"{logger_name:<32}")

        logger.setLevel(self._level)

        # add the handlers to logger
        if self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)
        if enable_stream_handler and self.logging_stream_handler not in logger.handlers:
            logger.addHandler(self.logging_stream_handler)

        return logger
