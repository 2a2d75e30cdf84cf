"""Configuration port definition (interface)."""

from typing import Protocol

__all__ = ["ConfigPort"]


class ConfigPort(Protocol):
    """Source of raw configuration values.

    Decouples the core from the process environment, so tests can supply
    values deterministically. Any ``Mapping[str, str]`` satisfies it.
    """

    def get(self, key: str, /) -> str | None:
        """Return the raw value for key, or None when unset.

        Args:
            key: Configuration key, e.g. an environment variable name.

        Returns:
            Current value or None.
        """
        ...
