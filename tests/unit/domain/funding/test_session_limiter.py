import pytest

from devnetrequester.domain.funding.session_limiter import SessionLimiter


def test_can_request_below_limit():
    limiter = SessionLimiter(2)
    assert limiter.can_request() is True
    limiter.record_attempt()
    assert limiter.can_request() is True


def test_can_not_request_at_limit():
    limiter = SessionLimiter(2)
    limiter.record_attempt()
    limiter.record_attempt()
    assert limiter.count == 2
    assert limiter.can_request() is False


def test_zero_limit_never_allows():
    limiter = SessionLimiter(0)
    assert limiter.can_request() is False


def test_reset():
    for attempts in [0, 1, 2, 7]:
        limiter = SessionLimiter(2)
        for _ in range(attempts):
            limiter.record_attempt()
        limiter.reset()
        assert limiter.count == 0
        assert limiter.can_request() is True


def test_negative_limit():
    with pytest.raises(ValueError):
        SessionLimiter(-1)
