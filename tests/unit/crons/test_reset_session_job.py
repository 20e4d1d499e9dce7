from devnetrequester.crons import reset_session_job as job
from devnetrequester.domain.funding.funding_state import FundingState
from devnetrequester.domain.funding.request_statistics import RequestStatistics
from devnetrequester.domain.funding.session_limiter import SessionLimiter


async def test_reset_session():
    state = FundingState(SessionLimiter(2), RequestStatistics())
    state.session_limiter.record_attempt()
    state.session_limiter.record_attempt()
    state.statistics.record_attempt()

    await job.execute(state)

    assert state.session_limiter.count == 0
    assert state.session_limiter.can_request() is True
    # Statistics are not part of the session
    assert state.statistics.total_requests == 1
