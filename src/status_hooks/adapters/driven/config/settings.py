"""Configuration loading from environment variables."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from status_hooks.ports.http import DEFAULT_TIMEOUT_SEC

__all__ = ["EnvConfig", "Settings", "load_settings"]

load_dotenv()

logger = logging.getLogger(__name__)


class EnvConfig:
    """ConfigPort backed by the live process environment.

    Values are looked up on every call, never cached.
    """

    def get(self, key: str) -> str | None:
        """Return the environment variable key, or None when unset."""
        return os.environ.get(key)


class Settings(BaseModel):
    """Startup configuration for the status hooks.

    Attributes:
        http_timeout_sec: Per-request timeout for outbound calls.
        trigger_ca_path: Optional PEM CA bundle for trigger targets.
    """

    http_timeout_sec: float = Field(
        default=DEFAULT_TIMEOUT_SEC,
        gt=0,
        description="Dial, read and response-header timeout in seconds.",
    )
    trigger_ca_path: str | None = Field(
        default=None,
        description=(
            "PEM CA bundle used to validate trigger targets. "
            "If not set, target certificates are not verified."
        ),
    )

    @field_validator("trigger_ca_path")
    @classmethod
    def validate_trigger_ca_path(cls, v: str | None) -> str | None:
        """Validate that the CA bundle (if provided) exists.

        Args:
            v: CA bundle path (can be None).

        Returns:
            The validated path or None.

        Raises:
            ValueError: If the file does not exist.
        """
        if v is None:
            return v
        if not Path(v).is_file():
            raise ValueError(f"CA bundle not found: {v}")
        return v


def load_settings() -> Settings:
    """Load and validate settings from the environment.

    Optional environment variables:
    - HTTP_TIMEOUT_SECONDS: Positive number, defaults to 30.
    - STATUS_CHANGED_TRIGGER_CA_PATH: PEM CA bundle for trigger targets.

    STATUS_CHANGED_TRIGGER itself is not part of Settings: it is read on
    every notification through EnvConfig.

    Returns:
        Validated Settings object.

    Raises:
        RuntimeError: If HTTP_TIMEOUT_SECONDS is not a number.
        ValueError: If configuration is invalid.
    """
    timeout_raw = os.getenv("HTTP_TIMEOUT_SECONDS")
    ca_path = os.getenv("STATUS_CHANGED_TRIGGER_CA_PATH") or None

    timeout_sec = DEFAULT_TIMEOUT_SEC
    if timeout_raw:
        try:
            timeout_sec = float(timeout_raw)
        except ValueError as e:
            raise RuntimeError(
                f"HTTP_TIMEOUT_SECONDS must be a number (got: {timeout_raw})"
            ) from e

    settings = Settings(http_timeout_sec=timeout_sec, trigger_ca_path=ca_path)

    logger.info(
        f"Status hooks configured: timeout={settings.http_timeout_sec}s, "
        f"trigger_ca={settings.trigger_ca_path or '<insecure>'}"
    )

    return settings
