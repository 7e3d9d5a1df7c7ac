from ._logging import once
from .common import PACKAGE_PATH, load_package_data
from .config import Config, ConfigHelper

__all__ = [
    "PACKAGE_PATH",
    "Config",
    "ConfigHelper",
    "load_package_data",
    "once",
]
