"""TLS settings for outbound connections."""

import logging
import ssl

from status_hooks.ports.errors import RequestConstructionError

__all__ = ["build_ssl"]

logger = logging.getLogger(__name__)


def build_ssl(ca_path: str | None) -> ssl.SSLContext | bool:
    """Build the aiohttp ``ssl`` argument for one request.

    Args:
        ca_path: PEM CA bundle path, or None for insecure mode.

    Returns:
        False (skip certificate verification) when ca_path is None,
        otherwise a context that trusts only the bundle's CAs.

    Raises:
        RequestConstructionError: If the bundle cannot be read or parsed.
    """
    if ca_path is None:
        return False

    try:
        context = ssl.create_default_context(cafile=ca_path)
    except OSError as e:  # ssl.SSLError included
        logger.debug(f"Failed to load CA bundle {ca_path}: {e}")
        raise RequestConstructionError(f"Cannot load CA bundle {ca_path}: {e}") from e
    return context
