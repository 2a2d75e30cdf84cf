"""Recorder port definition (interface)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

__all__ = ["RecorderPort"]


class RecorderPort(Protocol):
    """Interface for emitting structured log records.

    The core holds no logging state of its own; callers pass an
    implementation in.
    """

    def record(self, level: int, message: str, fields: Mapping[str, str], /) -> None:
        """Emit one record.

        Args:
            level: A ``logging`` level, e.g. ``logging.INFO``.
            message: Human readable message.
            fields: Structured key/value context.
        """
        ...
