"""Ordered log severities and conversion to/from stdlib logging levels."""

import logging
from enum import IntEnum


class Severity(IntEnum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    UNKNOWN = 5


SEVERITY_BY_NAME = {
    "debug": Severity.DEBUG,
    "info": Severity.INFO,
    "warn": Severity.WARN,
    "error": Severity.ERROR,
    "fatal": Severity.FATAL,
    "unknown": Severity.UNKNOWN,
}

# stdlib spellings
_ALIASES = {
    "warning": Severity.WARN,
    "critical": Severity.FATAL,
}

_STDLIB_LEVELS = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
    Severity.UNKNOWN: logging.CRITICAL,
}


def coerce_severity(value) -> Severity:
    """Return a Severity for value, falling back to UNKNOWN. Never raises."""
    if isinstance(value, Severity):
        return value
    if isinstance(value, bool):
        return Severity.UNKNOWN
    if isinstance(value, int):
        try:
            return Severity(value)
        except ValueError:
            return Severity.UNKNOWN
    if isinstance(value, str):
        name = value.strip().lower()
        if name in SEVERITY_BY_NAME:
            return SEVERITY_BY_NAME[name]
        return _ALIASES.get(name, Severity.UNKNOWN)
    return Severity.UNKNOWN


def to_stdlib_level(severity: Severity) -> int:
    return _STDLIB_LEVELS[coerce_severity(severity)]


def from_stdlib_level(level: int) -> Severity:
    """Map a logging level onto the nearest Severity at or above it.

    NOTSET (0) counts as DEBUG; anything above CRITICAL is UNKNOWN.
    """
    if level <= logging.DEBUG:
        return Severity.DEBUG
    if level <= logging.INFO:
        return Severity.INFO
    if level <= logging.WARNING:
        return Severity.WARN
    if level <= logging.ERROR:
        return Severity.ERROR
    if level <= logging.CRITICAL:
        return Severity.FATAL
    return Severity.UNKNOWN
