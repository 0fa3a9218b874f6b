from abc import ABC, abstractmethod


class LoggingPort(ABC):
    """Sink for the library's diagnostic lines.

    Messages follow the ``[area:action] key=value`` convention, e.g.
    ``[retry:attempt] attempt 1/3 failed``. Positional `args` are applied
    lazily with %-formatting, as in the standard logging module.
    """

    @abstractmethod
    def is_enabled_for(self, level: int) -> bool:
        """Whether a record at `level` would be emitted at all."""

    @abstractmethod
    def debug(self, msg: str, *args) -> None:
        pass

    @abstractmethod
    def info(self, msg: str, *args) -> None:
        pass

    @abstractmethod
    def warning(self, msg: str, *args) -> None:
        pass

    @abstractmethod
    def error(self, msg: str, *args) -> None:
        pass
