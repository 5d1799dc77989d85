"""CallSiteLogger: wraps a log sink and annotates profiler duration reports."""

import logging
from typing import Any, Callable

from callsite_logger.collector import CallSiteCollector
from callsite_logger.config import Config, colorize_logging_enabled
from callsite_logger.rewriter import add_call_site_to_message
from callsite_logger.severity import Severity, coerce_severity, to_stdlib_level
from callsite_logger.sink import LogSink, StdlibSink

logger = logging.getLogger(__name__)

MessageBlock = Callable[[], Any]


class CallSiteLogger:
    """Drop-in LogSink that appends the triggering call site to duration reports.

    Every call goes filter -> resolve message -> rewrite -> forward. Records
    below the sink's threshold return True without evaluating the block or
    querying the collector.
    """

    def __init__(self, sink: LogSink, collector: CallSiteCollector,
                 colorize: bool | Callable[[], bool] = colorize_logging_enabled,
                 progname: str | None = None):
        self._sink = sink
        self._collector = collector
        self._colorize = colorize
        self._progname = progname

    @property
    def threshold(self):
        return self._sink.threshold

    @property
    def progname(self) -> str | None:
        return self._progname

    def log(self, severity=None, message=None, tag=None, block: MessageBlock | None = None):
        severity = coerce_severity(severity)
        if severity < self._sink.threshold:
            return True

        if message is None:
            if block is not None:
                message = block()
            else:
                message = tag
                tag = self._progname

        message = add_call_site_to_message(message, self._collector, self._colorize)
        return self._sink.log(severity, message, tag)

    def debug(self, tag=None, block: MessageBlock | None = None):
        return self.log(Severity.DEBUG, None, tag, block)

    def info(self, tag=None, block: MessageBlock | None = None):
        return self.log(Severity.INFO, None, tag, block)

    def warn(self, tag=None, block: MessageBlock | None = None):
        return self.log(Severity.WARN, None, tag, block)

    def error(self, tag=None, block: MessageBlock | None = None):
        return self.log(Severity.ERROR, None, tag, block)

    def fatal(self, tag=None, block: MessageBlock | None = None):
        return self.log(Severity.FATAL, None, tag, block)

    def unknown(self, tag=None, block: MessageBlock | None = None):
        return self.log(Severity.UNKNOWN, None, tag, block)


def build_logger(config: Config, stdlib_logger: logging.Logger,
                 collector: CallSiteCollector) -> CallSiteLogger:
    """Wrap stdlib_logger according to config.

    min_level is applied to stdlib_logger; an unrecognized level leaves it
    at DEBUG. COLORIZE_LOGGING still overrides config.colorize_logging at
    call time.
    """
    severity = coerce_severity(config.min_level)
    if severity is Severity.UNKNOWN and config.min_level.strip().lower() != "unknown":
        logger.warning("Unrecognized min_level %r, using DEBUG", config.min_level)
        severity = Severity.DEBUG

    if severity is Severity.UNKNOWN:
        stdlib_logger.setLevel(logging.CRITICAL + 1)
    else:
        stdlib_logger.setLevel(to_stdlib_level(severity))

    return CallSiteLogger(
        StdlibSink(stdlib_logger),
        collector,
        colorize=lambda: colorize_logging_enabled(config.colorize_logging),
        progname=config.default_tag,
    )
