"""Logging adapter implementing LoggingPort."""

from typing import Any

from awsdata.domain.base.ports.logging_port import LoggingPort
from awsdata.infrastructure.logging.logger import get_logger


class LoggingAdapter(LoggingPort):
    """
    LoggingPort backed by a package logger.

    Context passed to the constructor is merged into the ``extra`` mapping
    of every record, so it is rendered alongside the message by the
    structlog formatter.
    """

    def __init__(self, name: str = "application", **context: Any) -> None:
        self._logger = get_logger(name)
        self._context = context

    def _log(self, method: str, message: str, args: tuple, kwargs: dict[str, Any]) -> None:
        kwargs.setdefault("stacklevel", 3)
        if self._context:
            kwargs["extra"] = {**self._context, **kwargs.get("extra", {})}
        getattr(self._logger, method)(message, *args, **kwargs)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("debug", message, args, kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("info", message, args, kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("warning", message, args, kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("error", message, args, kwargs)

    def exception(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("exception", message, args, kwargs)
