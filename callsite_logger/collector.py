"""Call-site collector interface consumed by the call-site logger."""

from typing import Protocol


class CallSiteCollector(Protocol):
    def current_call_location(self) -> str:
        """Describe the code location that started the current profiled call."""
        ...


class StaticCollector:
    """Collector that reports whatever location it was last given."""

    def __init__(self, location: str = ""):
        self._location = location

    def set_location(self, location: str):
        self._location = location

    def current_call_location(self) -> str:
        return self._location
