"""
Tracing configuration for Chat Forms.

This module provides tracing setup using OpenAI Agents SDK's built-in
tracing capabilities. Traces can be viewed in the OpenAI dashboard.
"""

import logging

from agents import set_tracing_disabled
from agents.tracing import (
    Span,
    Trace,
    TracingProcessor,
    set_trace_processors,
)

logger = logging.getLogger("chat-forms")


class ConsoleTracingProcessor(TracingProcessor):
    """
    Logs trace and span boundaries of chat turns.

    Keeps the traces that have started but not ended, so a shutdown in
    the middle of a turn shows which turns were cut off.
    """

    def __init__(self, verbose: bool = False):
        """
        Args:
            verbose: If True, log every span as well.
        """
        self.verbose = verbose
        self._open: dict[str, str] = {}

    @property
    def open_traces(self) -> list[str]:
        """Names of traces that started and have not ended."""
        return list(self._open.values())

    def on_trace_start(self, trace: Trace) -> None:
        self._open[trace.trace_id] = trace.name
        logger.info("[TRACE START] %s (ID: %s...)", trace.name, trace.trace_id[:8])

    def on_trace_end(self, trace: Trace) -> None:
        self._open.pop(trace.trace_id, None)
        logger.info("[TRACE END] %s", trace.name)

    def on_span_start(self, span: Span[object]) -> None:
        if self.verbose:
            logger.debug("  [SPAN START] %s", span.span_data)

    def on_span_end(self, span: Span[object]) -> None:
        if self.verbose:
            logger.debug("  [SPAN END] %s", span.span_data)

    def shutdown(self) -> None:
        """Warn about unfinished traces and forget them."""
        for trace_id, name in self._open.items():
            logger.warning("Trace %s (ID: %s...) did not finish before shutdown", name, trace_id[:8])
        self._open.clear()
        self.force_flush()

    def force_flush(self) -> None:
        """Flush the handlers the trace log lines go to."""
        current = logger
        while current is not None:
            for handler in current.handlers:
                handler.flush()
            current = current.parent if current.propagate else None


def setup_tracing(
    enabled: bool = True,
    console: bool = False,
    verbose: bool = False,
) -> None:
    """
    Configure tracing for chat turns.

    By default, traces are sent to the OpenAI dashboard if you have
    an OpenAI API key configured.

    Args:
        enabled: Whether tracing is enabled.
        console: Whether to log traces to the console instead.
        verbose: Whether to log detailed span information.
    """
    if not enabled:
        set_tracing_disabled(True)
        return

    set_tracing_disabled(False)

    if console:
        set_trace_processors([ConsoleTracingProcessor(verbose=verbose)])


def disable_tracing() -> None:
    """Disable all tracing."""
    set_tracing_disabled(True)


def enable_tracing() -> None:
    """Enable tracing (uses default OpenAI dashboard)."""
    set_tracing_disabled(False)
