from ._config import Config, default_config_path
from ._defaults import DEFAULT_CONFIG
from ._dot_dict import DotDict

__all__ = ["Config", "DotDict", "DEFAULT_CONFIG", "default_config_path"]
