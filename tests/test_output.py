"""Tests for formatters and the console writer"""

import io
import json
from datetime import datetime, timezone

from context_logger import LogLevel
from context_logger.core.log_entry import LogEntry
from context_logger.formatters import JSONFormatter, TextFormatter
from context_logger.writers import ConsoleWriter


def make_entry(level=LogLevel.INFO, **kwargs):
    return LogEntry(
        level=level,
        message="Request processed",
        timestamp=datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc),
        **kwargs,
    )


class TestJSONFormatter:
    """Test JSON formatting."""

    def test_compact(self):
        text = JSONFormatter().format(make_entry(request_id="req-5"))
        assert "\n" not in text
        assert json.loads(text)["requestId"] == "req-5"

    def test_indented(self):
        text = JSONFormatter(indent=2).format(make_entry())
        assert text.startswith("{\n  ")

    def test_render_appends_newline(self):
        assert JSONFormatter().render(make_entry()).endswith("}\n")

    def test_non_ascii_kept(self):
        text = JSONFormatter().format(make_entry(metadata={"city": "서울"}))
        assert "서울" in text


class TestTextFormatter:
    """Test template formatting."""

    def test_default_template(self):
        text = TextFormatter().format(make_entry(trace_id="t1", metadata={"k": "v"}))
        assert text == "[2024-05-01T12:00:00.000Z] [INFO ] [t1] Request processed k='v'"

    def test_missing_identifiers(self):
        text = TextFormatter("{user_id} {message}", include_metadata=False).format(make_entry())
        assert text == "- Request processed"

    def test_error_appended(self):
        text = TextFormatter("{message}").format(
            make_entry(level=LogLevel.ERROR, error={"name": "E", "message": "boom"})
        )
        assert text == "Request processed error='boom'"

    def test_unknown_placeholder(self):
        text = TextFormatter("{nope}").format(make_entry())
        assert text.startswith("[FORMAT ERROR:")


class TestConsoleWriter:
    """Test severity-based stream selection."""

    def test_default_streams(self, capsys):
        writer = ConsoleWriter()
        writer(make_entry(LogLevel.DEBUG))
        writer(make_entry(LogLevel.INFO))
        writer(make_entry(LogLevel.WARN))
        writer(make_entry(LogLevel.ERROR))

        captured = capsys.readouterr()
        out_levels = [json.loads(line)["level"] for line in captured.out.splitlines()]
        err_levels = [json.loads(line)["level"] for line in captured.err.splitlines()]
        assert out_levels == ["debug", "info"]
        assert err_levels == ["warn", "error"]

    def test_pretty_print(self, capsys):
        ConsoleWriter(pretty_print=True).write(make_entry())

        out = capsys.readouterr().out
        assert out.count("\n") > 1
        assert json.loads(out)["message"] == "Request processed"

    def test_injected_streams(self):
        audit = io.StringIO()
        writer = ConsoleWriter(streams={LogLevel.ERROR: audit})

        writer(make_entry(LogLevel.ERROR))

        assert json.loads(audit.getvalue())["level"] == "error"

    def test_custom_formatter(self):
        buffer = io.StringIO()
        writer = ConsoleWriter(formatter=TextFormatter("{level}"), streams={LogLevel.INFO: buffer})

        writer(make_entry())

        assert buffer.getvalue() == "INFO\n"

    def test_streams_keyed_by_level_name(self, capsys):
        writer = ConsoleWriter(streams={"warn": "stdout", "ERROR": "stdout"})

        writer(make_entry(LogLevel.WARN))
        writer(make_entry(LogLevel.ERROR))

        captured = capsys.readouterr()
        assert [json.loads(line)["level"] for line in captured.out.splitlines()] == ["warn", "error"]
        assert captured.err == ""
