from __future__ import annotations

from ip_notifier.utils.error_handler import (
    ErrorContext, ErrorHandler, ErrorSeverity, ErrorType, NotifyError
)
from ip_notifier.utils.logger import LogLevel, Logger


def test_warnings_and_errors_go_to_stderr(capsys):
    log = Logger("test", min_level=LogLevel.DEBUG)

    log.info("info-line")
    log.warning("warn-line")
    log.error("error-line", exception=ValueError("boom"))

    captured = capsys.readouterr()
    assert "info-line" in captured.out
    assert "warn-line" in captured.err
    assert "error-line" in captured.err
    assert "ValueError: boom" in captured.err


def test_min_level_filters_messages(capsys):
    log = Logger("test", min_level=LogLevel.WARNING)

    log.debug("hidden-debug")
    log.info("hidden-info")
    log.success("hidden-success")
    log.warning("shown")

    captured = capsys.readouterr()
    assert "hidden" not in captured.out + captured.err
    assert "shown" in captured.err


def test_address_summary_lists_addresses(capsys):
    Logger("test").address_summary("host1", "192.168", ["192.168.1.20", "192.168.2.4"])

    out = capsys.readouterr().out
    assert "host1" in out
    assert "192.168.1.20, 192.168.2.4" in out


def test_error_handler_classifies_and_suggests(capsys):
    handler = ErrorHandler(Logger("test", min_level=LogLevel.DEBUG))
    error = NotifyError("status code: 401", status_code=401)
    context = handler.context_for(error, "send", "GotifyNotifier")

    assert context.error_type == ErrorType.NOTIFY_ERROR
    assert context.severity == ErrorSeverity.CRITICAL
    assert handler.handle_error(error, context) is False

    captured = capsys.readouterr()
    assert "GotifyNotifier.send" in captured.err
    assert "token" in captured.out


def test_low_severity_is_logged_at_debug(capsys):
    handler = ErrorHandler(Logger("test", min_level=LogLevel.INFO))
    context = ErrorContext(
        error_type=ErrorType.VALIDATION_ERROR,
        severity=ErrorSeverity.LOW,
        operation="check",
        component="Test",
    )

    handler.handle_error(ValueError("minor"), context)

    captured = capsys.readouterr()
    assert "minor" not in captured.out + captured.err
