"""RecorderPort backed by the standard logging module."""

import logging
from collections.abc import Mapping

from status_hooks.ports.recorder import RecorderPort

__all__ = ["LoggingRecorder", "render_fields"]


def render_fields(fields: Mapping[str, str]) -> str:
    """Render fields as space separated key=value pairs."""
    return " ".join(f"{key}={value}" for key, value in fields.items())


class LoggingRecorder(RecorderPort):
    """Emit records through a ``logging.Logger``.

    Fields are appended to the message and also attached to the log record
    as ``record.fields`` for handlers that want them structured.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("status_hooks.trigger")

    def record(self, level: int, message: str, fields: Mapping[str, str]) -> None:
        """Log message with fields at level."""
        text = f"{message} {render_fields(fields)}" if fields else message
        self._logger.log(level, text, extra={"fields": dict(fields)})
