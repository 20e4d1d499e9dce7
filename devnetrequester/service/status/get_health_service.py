from datetime import UTC
from datetime import datetime

from devnetrequester.domain.funding.funding_state import FundingState
from devnetrequester.service.status.entities import HealthResponse


def execute(state: FundingState) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        uptime=state.statistics.get_uptime_seconds(),
    )
