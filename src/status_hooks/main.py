"""Command-line entrypoint: notify targets that an instance changed status."""

import argparse
import asyncio
import logging
from collections.abc import Sequence

from status_hooks.adapters.driven.config.settings import EnvConfig, load_settings
from status_hooks.adapters.driven.http.client import HttpClient
from status_hooks.adapters.driven.logging.logging_config import configure_logs
from status_hooks.adapters.driven.logging.recorder import LoggingRecorder
from status_hooks.core.status_trigger import StatusChangedNotifier

__all__ = ["main", "parse_args"]

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="status-hooks",
        description="Notify STATUS_CHANGED_TRIGGER targets that an instance changed status.",
    )
    parser.add_argument("instance_name", help="Name of the instance whose status changed.")
    parser.add_argument("namespace", help="Namespace of the instance.")
    return parser.parse_args(argv)


async def main(argv: Sequence[str] | None = None) -> int:
    """Send one status-changed notification and wait for it to settle.

    Startup sequence:
    1. Configure logging.
    2. Load and validate configuration.
    3. Fan the notification out to every configured target.
    4. Wait for all triggers; failures are logged, never raised.

    Returns:
        0 once all triggers finished, 1 on configuration error.
    """
    args = parse_args(argv)
    configure_logs()

    try:
        config = load_settings()
    except (RuntimeError, ValueError) as exc:
        logger.error(
            "Configuration error: %s\n"
            "Hint: check HTTP_TIMEOUT_SECONDS and STATUS_CHANGED_TRIGGER_CA_PATH.",
            exc,
        )
        return 1

    http_client = HttpClient(timeout_sec=config.http_timeout_sec)
    notifier = StatusChangedNotifier(
        put_fn=http_client.put,
        config=EnvConfig(),
        recorder=LoggingRecorder(),
        ca_path=config.trigger_ca_path,
    )

    notifier.notify_status_changed(args.instance_name, args.namespace)
    logger.info(f"Dispatched {notifier.pending} status changed trigger(s) for {args.instance_name}")

    try:
        await notifier.wait_pending()
    except asyncio.CancelledError:
        await notifier.shutdown()
        raise

    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(asyncio.run(main()))
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Shutdown requested by user (Ctrl+C).")
