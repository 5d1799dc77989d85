import pytest

from callsite_logger.severity import Severity


class RecordingSink:
    """Stands in for a real sink; remembers every forwarded call."""

    def __init__(self, threshold: Severity = Severity.DEBUG):
        self.threshold = threshold
        self.calls: list[tuple] = []

    def log(self, severity, message, tag=None):
        self.calls.append((severity, message, tag))
        return True


class CountingCollector:
    def __init__(self, location: str = "app.rb:10"):
        self.location = location
        self.queries = 0

    def current_call_location(self) -> str:
        self.queries += 1
        return self.location


class FailingCollector:
    def current_call_location(self) -> str:
        raise RuntimeError("no profiled call in progress")


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def collector():
    return CountingCollector()
