"""Recognizes profiler duration reports and appends the triggering call site.

A duration report looks like ``User Load (0.4ms)  SELECT ...`` or
``Query (0.002 seconds)  SELECT 1``, optionally wrapped in ANSI color codes:

  1. Leading whitespace and color escapes
  2. A label with no '('
  3. '(' number unit ')' where unit is s, seconds, ms, us, ...
  4. Trailing color escapes and the rest of the line

Only the presence of a match matters; the captured groups stay in the
original text. Any line of a multi-line message may be the report.
"""

import logging
import re
from typing import Callable

from callsite_logger.collector import CallSiteCollector
from callsite_logger.formatting import format_location

logger = logging.getLogger(__name__)

_ESCAPE = r"(?:\x1b\[[0-9;]*m)*"

DURATION_REPORT_RE = re.compile(
    r"^\s*" + _ESCAPE
    + r"(?P<label>[^(]*)"
    + r"\((?P<duration>[0-9.]+)\s*(?P<unit>[a-z]?s(?:econds)?)\)"
    + _ESCAPE
    + r"\s*(?P<rest>.*)",
    re.MULTILINE,
)

CALLED_BY_MARKER = " CALLED BY '"

_ANNOTATION_RE = re.compile(r" CALLED BY '[^']*'\Z")


def is_duration_report(message) -> bool:
    """True if message is text shaped like a not-yet-annotated duration report."""
    if not isinstance(message, str):
        return False
    if _ANNOTATION_RE.search(message):
        return False
    return DURATION_REPORT_RE.search(message) is not None


def add_call_site_to_message(message, collector: CallSiteCollector,
                             highlight: bool | Callable[[], bool] = False):
    """Append ``CALLED BY '<location>'`` to duration reports; return others unchanged.

    The collector is only queried when the message matches. If it raises,
    the message is returned unannotated so the log line is not lost.
    """
    if not is_duration_report(message):
        return message

    try:
        location = collector.current_call_location()
    except Exception as exc:
        logger.warning("Call-site lookup failed, logging without location: %s", exc)
        return message

    enabled = highlight() if callable(highlight) else highlight
    return f"{message}{CALLED_BY_MARKER}{format_location(location, enabled)}'"
