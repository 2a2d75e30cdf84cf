"""Tests for the logging-backed recorder."""

import logging

from status_hooks.adapters.driven.logging.recorder import LoggingRecorder, render_fields

__all__ = []


def test_render_fields() -> None:
    """Fields should render as key=value pairs in insertion order."""
    fields = {"trigger.target": "http://a/hook", "instance.Name": "abc"}

    assert render_fields(fields) == "trigger.target=http://a/hook instance.Name=abc"


def test_recorder_logs_message_and_fields(caplog) -> None:
    """Records should carry fields both in the message and on the record."""
    caplog.set_level(logging.INFO, logger="status_hooks.trigger")
    recorder = LoggingRecorder()

    recorder.record(logging.ERROR, "trigger failed", {"trigger.target": "http://a", "error": "boom"})

    [record] = caplog.records
    assert record.levelno == logging.ERROR
    assert record.getMessage() == "trigger failed trigger.target=http://a error=boom"
    assert record.fields == {"trigger.target": "http://a", "error": "boom"}


def test_recorder_uses_given_logger(caplog) -> None:
    """A caller supplied logger should be used."""
    caplog.set_level(logging.INFO, logger="custom")
    recorder = LoggingRecorder(logging.getLogger("custom"))

    recorder.record(logging.INFO, "plain", {})

    [record] = caplog.records
    assert record.name == "custom"
    assert record.getMessage() == "plain"
