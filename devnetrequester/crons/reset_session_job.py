from devnetrequester.api_logger import api_logger
from devnetrequester.domain.funding.funding_state import FundingState

logger = api_logger.get()


async def execute(state: FundingState) -> None:
    previous_count = state.session_limiter.count
    state.reset_session()
    logger.info(f"Session counter reset, {previous_count} attempts in the last session")
