"""Tests for the configuration health check."""

from unittest.mock import patch

from status_hooks.adapters.driven.config.health_check import invalid_targets, main
from status_hooks.core.status_trigger import TRIGGER_ENV

__all__ = []


def test_health_check_success(monkeypatch) -> None:
    """Health check should return 0 when settings and targets are valid."""
    monkeypatch.setenv(TRIGGER_ENV, "http://a/hook, https://b.example.com/hook")
    with (
        patch("status_hooks.adapters.driven.config.health_check.configure_logs"),
        patch("status_hooks.adapters.driven.config.health_check.load_settings") as mock_load,
    ):
        mock_load.return_value = None
        result = main()

    assert result == 0


def test_health_check_failure_on_config_error() -> None:
    """Health check should return 1 when configuration fails to load."""
    with (
        patch("status_hooks.adapters.driven.config.health_check.configure_logs"),
        patch("status_hooks.adapters.driven.config.health_check.load_settings") as mock_load,
    ):
        mock_load.side_effect = RuntimeError("Invalid configuration")
        result = main()

    assert result == 1


def test_health_check_failure_on_invalid_target(monkeypatch) -> None:
    """Health check should return 1 when a target is not an http(s) URL."""
    monkeypatch.setenv(TRIGGER_ENV, "http://a/hook,ftp://b/hook")
    with (
        patch("status_hooks.adapters.driven.config.health_check.configure_logs"),
        patch("status_hooks.adapters.driven.config.health_check.load_settings"),
    ):
        result = main()

    assert result == 1


def test_invalid_targets_reports_offenders_in_order() -> None:
    """Only entries that are not http(s) URLs should be reported."""
    config = {TRIGGER_ENV: "not-a-url, http://ok/hook, "}

    assert invalid_targets(config) == ["not-a-url", ""]


def test_invalid_targets_without_configuration() -> None:
    """No configured targets means nothing to report."""
    assert invalid_targets({}) == []
