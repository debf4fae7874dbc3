import sys

import loguru

from gameutils import PACKAGE_NAME, data_home


def configure_logger(debug: bool, rotation: str = "5 MB") -> None:
    loguru.logger.enable(PACKAGE_NAME)
    loguru.logger.remove()

    if debug:
        loguru.logger.add(sys.stderr, level="DEBUG")
    else:
        loguru.logger.add(str(data_home / "gameutils.log"), rotation=rotation, level="INFO")
