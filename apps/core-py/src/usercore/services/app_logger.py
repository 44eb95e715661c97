"""Logger port used by the user service, with a console implementation."""

import logging
from abc import ABC, abstractmethod

Scalar = str | int | float | bool | None
LogPayload = dict[str, Scalar]


class AppLogger(ABC):
    """Abstract interface for service-level logging.

    Implementations are best effort: they must never raise into the caller.
    """

    @abstractmethod
    def info(self, message: str, payload: LogPayload | None = None) -> None:
        """Record an informational event."""
        pass

    @abstractmethod
    def warn(self, message: str, payload: LogPayload | None = None) -> None:
        """Record a warning."""
        pass

    @abstractmethod
    def error(self, message: str, error: BaseException | str | None = None) -> None:
        """Record a failure with optional error detail."""
        pass


def format_payload(payload: LogPayload | None) -> str:
    """Render a payload as space-separated key=value pairs."""
    if not payload:
        return ""
    return " ".join(f"{key}={value!r}" if isinstance(value, str) else f"{key}={value}" for key, value in payload.items())


class ConsoleLogger(AppLogger):
    """AppLogger that writes through the standard logging module."""

    def __init__(self, name: str = "usercore", level: int | str | None = None) -> None:
        """Initialize the console logger.

        Args:
            name: Name of the underlying logging.Logger
            level: Optional level applied to that logger
        """
        self._logger = logging.getLogger(name)
        if level is not None:
            self._logger.setLevel(level.upper() if isinstance(level, str) else level)

    def _emit(self, level: int, message: str, detail: str) -> None:
        try:
            if detail:
                self._logger.log(level, "%s | %s", message, detail)
            else:
                self._logger.log(level, "%s", message)
        except Exception:  # noqa: BLE001 - logging must never fail the caller
            pass

    def info(self, message: str, payload: LogPayload | None = None) -> None:
        self._emit(logging.INFO, message, self._safe_format(payload))

    def warn(self, message: str, payload: LogPayload | None = None) -> None:
        self._emit(logging.WARNING, message, self._safe_format(payload))

    def error(self, message: str, error: BaseException | str | None = None) -> None:
        if error is None:
            detail = ""
        elif isinstance(error, BaseException):
            detail = f"{type(error).__name__}: {error}"
        else:
            detail = error
        self._emit(logging.ERROR, message, detail)

    @staticmethod
    def _safe_format(payload: LogPayload | None) -> str:
        try:
            return format_payload(payload)
        except Exception:  # noqa: BLE001
            return "<unprintable payload>"
