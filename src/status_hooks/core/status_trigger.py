"""Fan-out of status-changed notifications to configured targets."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from http import HTTPStatus

from aiohttp import ClientResponse

from status_hooks.ports.errors import UnexpectedStatusError
from status_hooks.ports.recorder import RecorderPort
from status_hooks.ports.settings import ConfigPort

__all__ = ["StatusChangedNotifier", "parse_targets", "TRIGGER_ENV"]

TRIGGER_ENV = "STATUS_CHANGED_TRIGGER"

FIELD_TARGET = "trigger.target"
FIELD_INSTANCE = "instance.Name"

PutFn = Callable[..., Awaitable[ClientResponse]]


def parse_targets(raw: str | None) -> list[str]:
    """Split a comma-separated target list.

    Entries are stripped but neither deduplicated nor filtered, so an
    empty entry yields an empty target.

    Args:
        raw: Raw configuration value.

    Returns:
        Targets in configured order; empty when raw is unset or blank.
    """
    if not raw or not raw.strip():
        return []
    return [target.strip() for target in raw.split(",")]


class StatusChangedNotifier:
    """Notify external systems that an instance changed status.

    Each target gets its own PUT in its own task; the caller never waits
    and never sees a failure, which only ends up in the recorder.
    """

    def __init__(
        self,
        put_fn: PutFn,
        config: ConfigPort,
        recorder: RecorderPort,
        *,
        ca_path: str | None = None,
    ) -> None:
        """Initialize notifier.

        Args:
            put_fn: Coroutine function with the signature of ``HttpClient.put``.
            config: Source of the ``STATUS_CHANGED_TRIGGER`` value, read on
                every notification.
            recorder: Sink for per-target success/failure records.
            ca_path: Optional CA bundle; when set, targets are called over
                validated TLS.
        """
        self._put = put_fn
        self._config = config
        self._recorder = recorder
        self._ca_path = ca_path
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """Number of triggers still in flight."""
        return len(self._pending)

    def notify_status_changed(self, instance_name: str, namespace: str) -> None:
        """Dispatch one trigger per configured target and return at once.

        Must be called from a running event loop.

        Args:
            instance_name: Name of the instance whose status changed.
            namespace: Namespace of the instance.
        """
        targets = parse_targets(self._config.get(TRIGGER_ENV))
        if not targets:
            return

        loop = asyncio.get_running_loop()
        for target in targets:
            # Fire and forget
            task = loop.create_task(self._trigger(target, instance_name, namespace))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    async def _trigger(self, target: str, instance_name: str, namespace: str) -> None:
        """Send one trigger and record its outcome."""
        fields = {FIELD_TARGET: target, FIELD_INSTANCE: instance_name}
        params = {"instanceName": instance_name, "namespace": namespace}
        try:
            resp = await self._put(target, None, params, None, ca_path=self._ca_path)
            if resp.status != HTTPStatus.OK:
                raise UnexpectedStatusError(target, resp.status)
        except Exception as e:  # noqa: BLE001
            self._recorder.record(
                logging.ERROR,
                "status changed trigger failed",
                {**fields, "error": str(e)},
            )
            return

        self._recorder.record(logging.INFO, "status changed trigger succeeded", fields)

    async def wait_pending(self) -> None:
        """Wait until every in-flight trigger has finished."""
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)

    async def shutdown(self) -> None:
        """Cancel in-flight triggers and wait for them to unwind."""
        pending = list(self._pending)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
