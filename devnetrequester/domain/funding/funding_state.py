from devnetrequester.domain.funding.request_statistics import RequestStatistics
from devnetrequester.domain.funding.session_limiter import SessionLimiter


class FundingState:
    """Mutable state shared by every orchestration in this process."""

    def __init__(self, session_limiter: SessionLimiter, statistics: RequestStatistics):
        self.session_limiter = session_limiter
        self.statistics = statistics

    def reset_session(self) -> None:
        self.session_limiter.reset()
