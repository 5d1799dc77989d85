"""logging.Filter that annotates duration reports on stdlib log records."""

import logging
from typing import Callable

from callsite_logger.collector import CallSiteCollector
from callsite_logger.config import colorize_logging_enabled
from callsite_logger.rewriter import add_call_site_to_message


class CallSiteFilter(logging.Filter):
    """Rewrites matching records in place. Never drops a record."""

    def __init__(self, collector: CallSiteCollector,
                 colorize: bool | Callable[[], bool] = colorize_logging_enabled):
        super().__init__()
        self._collector = collector
        self._colorize = colorize

    def filter(self, record: logging.LogRecord) -> bool:
        if not isinstance(record.msg, str):
            return True
        try:
            rendered = record.getMessage()
        except (TypeError, ValueError):
            # left for the handler to report via handleError
            return True
        rewritten = add_call_site_to_message(rendered, self._collector, self._colorize)
        if rewritten is not rendered:
            record.msg = rewritten
            record.args = None
        return True
