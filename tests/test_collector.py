"""Tests for the static call-site collector."""

from callsite_logger.collector import StaticCollector
from callsite_logger.logger import CallSiteLogger
from conftest import RecordingSink


class TestStaticCollector:
    def test_default_is_empty(self):
        assert StaticCollector().current_call_location() == ""

    def test_set_location(self):
        collector = StaticCollector("app.py:1")
        assert collector.current_call_location() == "app.py:1"
        collector.set_location("jobs/sync.py:88")
        assert collector.current_call_location() == "jobs/sync.py:88"

    def test_fetched_fresh_per_call(self):
        sink = RecordingSink()
        collector = StaticCollector("first.py:1")
        log = CallSiteLogger(sink, collector, colorize=False)
        log.info("Q (1ms)")
        collector.set_location("second.py:2")
        log.info("Q (1ms)")
        assert sink.calls[0][1].endswith("CALLED BY 'first.py:1'")
        assert sink.calls[1][1].endswith("CALLED BY 'second.py:2'")
