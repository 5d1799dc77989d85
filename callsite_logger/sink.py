"""Log sink interface and an adapter over stdlib logging.Logger."""

import logging
from typing import Protocol

from callsite_logger.severity import Severity, from_stdlib_level, to_stdlib_level


class LogSink(Protocol):
    @property
    def threshold(self) -> int:
        ...

    def log(self, severity: Severity, message, tag=None) -> bool:
        ...


class StdlibSink:
    """Forwards records to a logging.Logger, attaching the tag as ``record.tag``.

    UNKNOWN is emitted at CRITICAL, or at the logger's effective level when
    that is higher, so it is never dropped by the logger.
    """

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def threshold(self) -> Severity:
        return from_stdlib_level(self._logger.getEffectiveLevel())

    def log(self, severity: Severity, message, tag=None) -> bool:
        level = to_stdlib_level(severity)
        if severity == Severity.UNKNOWN:
            level = max(level, self._logger.getEffectiveLevel())
        self._logger.log(level, message, extra={"tag": tag})
        return True
