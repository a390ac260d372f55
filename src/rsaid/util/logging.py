import logging
from typing import Literal

from rsaid.util.config import RsaIdSettings


class LoggingSettings(RsaIdSettings):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: str = "%(asctime)s %(name)-12s %(levelname)-8s %(message)s"


log_settings = LoggingSettings()


def setup_logging() -> None:
    """
    Initial logging setup.

    Console output is filtered to `APP_LOG_LEVEL` (`WARNING` if not set) and formatted with `APP_LOG_FORMAT`.
    """
    default_handler = logging.StreamHandler()
    default_handler.setLevel(logging.getLevelName(log_settings.log_level))
    default_handler.setFormatter(logging.Formatter(log_settings.log_format))

    # The root logger stays at NOTSET so other handlers can still see messages below the console level.
    logging.basicConfig(
        level=logging.NOTSET,
        handlers=[default_handler],
    )
