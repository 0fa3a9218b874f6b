import logging

from oxtensions.core.interfaces.logging import LoggingPort


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    return logging.getLevelNamesMapping().get(log_level.upper().strip(), logging.INFO)


class LoggingAdapter(LoggingPort):
    """LoggingPort backed by a named stdlib logger.

    No handlers are attached here; records propagate to whatever the host
    application (or `configure_logging`) installed on the root logger.
    Unknown level names fall back to INFO.
    """

    def __init__(self, name: str = "oxtensions", log_level: int | str = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(_resolve_level(log_level))
        self.logger.propagate = True

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def debug(self, msg: str, *args) -> None:
        self.logger.debug(msg, *args)

    def info(self, msg: str, *args) -> None:
        self.logger.info(msg, *args)

    def warning(self, msg: str, *args) -> None:
        self.logger.warning(msg, *args)

    def error(self, msg: str, *args) -> None:
        self.logger.error(msg, *args)
