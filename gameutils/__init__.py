import os
from functools import cache
from importlib import metadata

from loguru import logger
from xdg_base_dirs import xdg_data_home

PACKAGE_NAME = "gameutils"


@cache
def get_version() -> str:
    return os.getenv("GAMEUTILS_VERSION") or metadata.version(PACKAGE_NAME)


data_home = xdg_data_home() / PACKAGE_NAME

logger.disable(PACKAGE_NAME)

try:
    __version__ = get_version()
except metadata.PackageNotFoundError:
    # Running from a source checkout.
    __version__ = "0.0.0"
