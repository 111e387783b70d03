"""Tests for log entry construction"""

from datetime import datetime, timezone

import pytest

from context_logger import LogLevel, LoggerConfig
from context_logger.core.entry_builder import EntryBuilder
from context_logger.core.log_entry import LogEntry


class FakeContext:
    """Context provider double exposing get()."""

    def __init__(self, **values):
        self.values = values

    def get(self, key):
        return self.values.get(key)


class TestEntryBuilder:
    """Test EntryBuilder.build()."""

    def test_basic_entry(self):
        before = datetime.now(timezone.utc)
        entry = EntryBuilder(LoggerConfig()).build(LogLevel.INFO, "hello")

        assert isinstance(entry, LogEntry)
        assert entry.level == LogLevel.INFO
        assert entry.message == "hello"
        assert entry.timestamp >= before
        assert entry.metadata is None
        assert entry.error is None

    def test_merge_order(self):
        config = LoggerConfig(default_metadata={"a": 1, "b": 1})
        entry = EntryBuilder(config).build(
            LogLevel.INFO, "msg", {"b": 2, "c": 2}, {"c": 3, "d": 3}
        )
        assert entry.metadata == {"a": 1, "b": 2, "c": 3, "d": 3}

    def test_error_split(self):
        entry = EntryBuilder(LoggerConfig()).build(
            LogLevel.ERROR, "msg", None, {"error": {"message": "x"}, "k": "v"}
        )
        assert entry.error == {"message": "x"}
        assert entry.metadata == {"k": "v"}

    def test_only_error_leaves_no_metadata(self):
        entry = EntryBuilder(LoggerConfig()).build(
            LogLevel.ERROR, "msg", None, {"error": {"message": "x"}}
        )
        assert entry.metadata is None

    def test_context_identifiers(self):
        provider = lambda: FakeContext(traceId="t", requestId="r", userId="u", other="x")
        entry = EntryBuilder(LoggerConfig(context_provider=provider)).build(LogLevel.INFO, "msg")

        assert (entry.trace_id, entry.request_id, entry.user_id) == ("t", "r", "u")
        assert entry.metadata is None

    def test_context_without_get(self):
        builder = EntryBuilder(LoggerConfig(context_provider=lambda: object()))
        assert builder.extract_context_data() == {}

    def test_enrichment_disabled_skips_provider(self):
        calls = []

        def provider():
            calls.append(1)
            return FakeContext(traceId="t")

        config = LoggerConfig(context_provider=provider, enrich_with_context=False)
        entry = EntryBuilder(config).build(LogLevel.INFO, "msg")

        assert calls == []
        assert entry.trace_id is None


class TestLogEntry:
    """Test the immutable record."""

    def make_entry(self, **kwargs):
        return LogEntry(
            level=LogLevel.WARN,
            message="msg",
            timestamp=datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc),
            **kwargs,
        )

    def test_wire_format(self):
        entry = self.make_entry(trace_id="t1", metadata={"k": 1})
        assert entry.to_dict() == {
            "level": "warn",
            "message": "msg",
            "timestamp": "2024-01-02T03:04:05.678Z",
            "traceId": "t1",
            "metadata": {"k": 1},
        }

    def test_absent_fields_omitted(self):
        assert set(self.make_entry().to_dict()) == {"level", "message", "timestamp"}

    def test_from_dict(self):
        entry = self.make_entry(user_id="u1", error={"message": "x"})
        assert LogEntry.from_dict(entry.to_dict()) == entry

    def test_frozen(self):
        entry = self.make_entry()
        with pytest.raises(AttributeError):
            entry.message = "changed"

    def test_level_type_checked(self):
        with pytest.raises(TypeError):
            LogEntry(level="info", message="m", timestamp=datetime.now(timezone.utc))

    def test_message_coerced(self):
        entry = LogEntry(level=LogLevel.INFO, message=42, timestamp=datetime.now(timezone.utc))
        assert entry.message == "42"

    def test_to_json_handles_unserializable(self):
        entry = self.make_entry(metadata={"when": datetime(2024, 1, 1)})
        assert '"when": "2024-01-01 00:00:00"' in entry.to_json()

    def test_str(self):
        assert str(self.make_entry(trace_id="t1")) == "[2024-01-02T03:04:05.678Z] [WARN ] [t1] msg"


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARN < LogLevel.ERROR
        assert [int(level) for level in LogLevel] == [0, 1, 2, 3]

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO
        assert LogLevel.from_string("warning") == LogLevel.WARN

    def test_invalid(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")
        with pytest.raises(TypeError):
            LogLevel.coerce(3)

    def test_str(self):
        assert str(LogLevel.ERROR) == "error"
