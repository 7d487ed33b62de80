"""
Organizer API - Load Test Threshold Tests

Checks the pass/fail rules applied at the end of a Locust run, using
stand-in stats objects so Locust itself is not needed.
"""

import pytest

from thresholds import check_thresholds


class FakeEntry:
    def __init__(self, p95=100.0, p99=200.0, num_requests=100, fail_ratio=0.0):
        self._percentiles = {0.95: p95, 0.99: p99}
        self.num_requests = num_requests
        self.fail_ratio = fail_ratio

    def get_response_time_percentile(self, percent):
        return self._percentiles[percent]


class FakeStats:
    def __init__(self, total=None, **entries):
        self.total = total or FakeEntry()
        self._entries = entries

    def get(self, name, method):
        return self._entries.get(name, FakeEntry(num_requests=0))


def endpoints(**overrides):
    entries = {
        "/authenticate": FakeEntry(),
        "/task/new": FakeEntry(),
        "/task/update": FakeEntry(),
    }
    entries.update(overrides)
    return entries


class TestCheckThresholds:

    def test_healthy_run_passes(self):
        assert check_thresholds(FakeStats(**endpoints())) == []

    def test_idle_run_passes(self):
        assert check_thresholds(FakeStats(total=FakeEntry(p95=0, p99=0, num_requests=0))) == []

    @pytest.mark.parametrize(
        "total, fragment",
        [
            (FakeEntry(p95=2500.0), "p95"),
            (FakeEntry(p99=6000.0), "p99"),
            (FakeEntry(fail_ratio=0.25), "failure rate"),
        ],
    )
    def test_overall_limits(self, total, fragment):
        breaches = check_thresholds(FakeStats(total=total, **endpoints()))
        assert len(breaches) == 1
        assert fragment in breaches[0]

    def test_auth_success_rate(self):
        stats = FakeStats(**endpoints(**{"/authenticate": FakeEntry(fail_ratio=0.2)}))
        breaches = check_thresholds(stats)
        assert len(breaches) == 1
        assert "auth success rate" in breaches[0]

    def test_slow_task_operations(self):
        stats = FakeStats(**endpoints(**{"/task/update": FakeEntry(p95=1800.0)}))
        assert check_thresholds(stats) == ["/task/update p95 1800 ms >= 1500 ms"]
