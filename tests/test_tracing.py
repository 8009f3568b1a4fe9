"""Tests for the console tracing processor."""

import logging
from types import SimpleNamespace

from chat_forms.tracing import ConsoleTracingProcessor


def _trace(name: str, trace_id: str):
    return SimpleNamespace(name=name, trace_id=trace_id)


class RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def emit(self, record):
        pass

    def flush(self):
        self.flushes += 1


class TestConsoleTracingProcessor:
    """Tests for ConsoleTracingProcessor."""

    def test_tracks_open_traces(self, caplog):
        """Test that ended traces are forgotten."""
        caplog.set_level(logging.INFO, logger="chat-forms")
        processor = ConsoleTracingProcessor()
        processor.on_trace_start(_trace("Chat Turn", "trace_aaaaaaaa1111"))
        processor.on_trace_start(_trace("Chat Turn 2", "trace_bbbbbbbb2222"))
        processor.on_trace_end(_trace("Chat Turn", "trace_aaaaaaaa1111"))
        assert processor.open_traces == ["Chat Turn 2"]
        assert "[TRACE START] Chat Turn (ID: trace_aa...)" in caplog.text
        assert "[TRACE END] Chat Turn" in caplog.text

    def test_shutdown_warns_about_unfinished(self, caplog):
        """Test that shutdown names the turns that were cut off."""
        caplog.set_level(logging.INFO, logger="chat-forms")
        processor = ConsoleTracingProcessor()
        processor.on_trace_start(_trace("Chat Turn", "trace_cccccccc3333"))
        processor.shutdown()
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Chat Turn" in warnings[0].getMessage()
        assert processor.open_traces == []

    def test_shutdown_quiet_when_all_ended(self, caplog):
        """Test that a clean shutdown logs no warning."""
        processor = ConsoleTracingProcessor()
        processor.on_trace_start(_trace("Chat Turn", "trace_dddddddd4444"))
        processor.on_trace_end(_trace("Chat Turn", "trace_dddddddd4444"))
        processor.shutdown()
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_force_flush_flushes_handlers(self):
        """Test that force_flush reaches the chat-forms handlers."""
        handler = RecordingHandler()
        logger = logging.getLogger("chat-forms")
        logger.addHandler(handler)
        try:
            ConsoleTracingProcessor().force_flush()
        finally:
            logger.removeHandler(handler)
        assert handler.flushes == 1

    def test_spans_logged_only_when_verbose(self, caplog):
        """Test that spans are logged at debug level in verbose mode."""
        caplog.set_level(logging.DEBUG, logger="chat-forms")
        span = SimpleNamespace(span_data="function renderForm")
        ConsoleTracingProcessor().on_span_start(span)
        assert "SPAN START" not in caplog.text
        ConsoleTracingProcessor(verbose=True).on_span_start(span)
        assert "[SPAN START] function renderForm" in caplog.text
