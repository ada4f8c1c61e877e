import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from hexbot import constants, labels
from hexbot.configuration._defaults import DEFAULT_CONFIG, merge
from hexbot.configuration._dot_dict import DotDict
from hexbot.logger import Logger
from hexbot.singleton import Singleton

log = Logger().setup_logger('Configuration')


def default_config_path() -> Path:
    """Config path from ``HEXBOT_CONFIG``, falling back to ``~/hexbot.json``."""
    env_path = os.environ.get(constants.CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.home() / constants.CONFIG_FILE_NAME


class Config(metaclass=Singleton):
    """
    Configuration management using dot notation.

    The user's JSON file is merged over the built-in defaults, so a file only
    needs the keys it changes.

    Usage examples:
        config = Config()

        address = config.motion_controller.pca9685.address
        kp = config.motion_controller.pid.kp
        device = config.remote_controller.get('device', 'js0')
        servo = config.get_servo(4)
    """

    def __init__(self, path: Optional[Union[str, Path]] = None, values: Optional[Dict[str, Any]] = None):
        self._path = Path(path) if path else default_config_path()
        self._raw_data: Dict[str, Any] = {}
        self._config: Optional[DotDict] = None

        if values is not None:
            self._load_values(values)
        else:
            self.load_config()
        self.list_modules()

    def _load_values(self, values: Dict[str, Any]) -> None:
        self._raw_data = merge(DEFAULT_CONFIG, values)
        self._config = DotDict(self._raw_data)

    def load_config(self) -> None:
        """Load configuration from the JSON file, or defaults if there is none.

        Raises:
            ValueError: If the file exists but is not valid JSON.
        """
        log.debug(labels.CONFIG_LOADING, self._path)

        if not self._path.exists():
            log.warning(labels.CONFIG_NOT_FOUND, self._path)
            self._load_values({})
            return

        try:
            with open(self._path, encoding='utf-8') as json_file:
                self._load_values(json.load(json_file))
        except json.JSONDecodeError as e:
            log.error(labels.CONFIG_INVALID_JSON, e)
            raise ValueError(f'Invalid configuration file {self._path}: {e}') from e

    def list_modules(self) -> None:
        """List all configured modules"""
        log.info(labels.CONFIG_MODULES, ', '.join(self._raw_data.keys()))

    def __getattr__(self, key: str) -> Any:
        """
        Enable dot notation access on Config object itself.
        Example: config.motion_controller instead of config._config.motion_controller
        """
        if key.startswith('_'):
            return object.__getattribute__(self, key)
        return getattr(self._config, key)

    def __getitem__(self, key: str) -> Any:
        """Enable dictionary-style access"""
        if self._config is None:
            raise RuntimeError("Configuration not loaded")
        return self._config[key]

    def get(self, key: str, default: Any = None) -> Any:
        """Safe get with default value"""
        if self._config is None:
            return default
        return self._config.get(key, default)

    def get_servo(self, index: int) -> DotDict:
        """
        Get the calibration of the servo on PWM channel ``index``.

        Returns:
            DotDict with minimum, maximum, neutral and inverted
        """
        try:
            return self.motion_controller.servos[str(index)]
        except KeyError:
            log.error("Servo %s not found in configuration", index)
            raise

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to regular dictionary"""
        return self._raw_data
