from datetime import UTC
from datetime import datetime
from datetime import timedelta

from devnetrequester.domain.funding.request_statistics import RequestStatistics


def test_initial_state():
    statistics = RequestStatistics()
    snapshot = statistics.snapshot()
    assert snapshot.total_requests == 0
    assert snapshot.successful_requests == 0
    assert snapshot.failed_requests == 0
    assert snapshot.last_request_time is None
    assert snapshot.last_success_time is None
    assert snapshot.success_rate == "0%"


def test_success_rate():
    test_cases = [
        (1, 1, "100.00%"),
        (3, 2, "66.67%"),
        (3, 1, "33.33%"),
        (4, 0, "0.00%"),
        (8, 3, "37.50%"),
    ]
    for total, successful, expected in test_cases:
        statistics = RequestStatistics()
        for i in range(total):
            statistics.record_attempt()
            if i < successful:
                statistics.record_success()
            else:
                statistics.record_failure()
        assert statistics.get_success_rate() == expected
        assert (
            statistics.successful_requests + statistics.failed_requests
            == statistics.total_requests
        )


def test_record_times():
    statistics = RequestStatistics()
    statistics.record_attempt()
    assert statistics.last_request_time is not None
    assert statistics.last_success_time is None

    statistics.record_success()
    assert statistics.last_success_time is not None


def test_uptime():
    statistics = RequestStatistics(start_time=datetime.now(UTC) - timedelta(seconds=90))
    assert 90 <= statistics.get_uptime_seconds() <= 91
