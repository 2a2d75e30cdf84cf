"""Configuration check for container orchestration."""

import logging

from pydantic import HttpUrl, TypeAdapter, ValidationError

from status_hooks.adapters.driven.config.settings import EnvConfig, load_settings
from status_hooks.adapters.driven.logging.logging_config import configure_logs
from status_hooks.core.status_trigger import TRIGGER_ENV, parse_targets
from status_hooks.ports.settings import ConfigPort

__all__ = ["main", "invalid_targets"]

logger = logging.getLogger(__name__)
_http_url_adapter = TypeAdapter(HttpUrl)


def invalid_targets(config: ConfigPort) -> list[str]:
    """Return configured trigger targets that are not valid http(s) URLs.

    Args:
        config: Source of the trigger target list.

    Returns:
        Offending targets in configured order.
    """
    bad: list[str] = []
    for target in parse_targets(config.get(TRIGGER_ENV)):
        try:
            _http_url_adapter.validate_python(target)
        except ValidationError:
            bad.append(target)
    return bad


def main() -> int:
    """Run config check for container orchestration.

    Validates:
    - Settings load from the environment.
    - Every STATUS_CHANGED_TRIGGER entry is an http(s) URL.

    Returns:
        0 if healthy, 1 if unhealthy.
    """
    configure_logs()

    try:
        _ = load_settings()
    except Exception as exc:
        logger.error(f"Status hooks healthcheck FAILED: {exc}")
        return 1

    bad = invalid_targets(EnvConfig())
    if bad:
        logger.error(f"Status hooks healthcheck FAILED: invalid {TRIGGER_ENV} targets {bad}")
        return 1

    logger.info("Status hooks healthcheck OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
