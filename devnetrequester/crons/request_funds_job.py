from decimal import Decimal
from typing import List

from devnetrequester.api_logger import api_logger
from devnetrequester.domain.funding import request_funds_use_case
from devnetrequester.domain.funding.entities import RequestOutcome
from devnetrequester.domain.funding.funding_state import FundingState
from devnetrequester.domain.funding.funding_strategy import FundingStrategy
from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository

logger = api_logger.get()


async def execute(
    address: str,
    amount: Decimal,
    state: FundingState,
    rpc_repository: SolanaRpcRepository,
    strategies: List[FundingStrategy],
    recheck_delay_seconds: float,
) -> RequestOutcome:
    outcome = await request_funds_use_case.execute(
        address,
        amount,
        state,
        rpc_repository,
        strategies,
        recheck_delay_seconds,
    )
    statistics = state.statistics
    if outcome.skipped:
        logger.info(f"Scheduled SOL request skipped: {outcome.message}")
    elif outcome.success:
        logger.info(
            f"Scheduled SOL request succeeded via {outcome.method.value}, "
            f"signature={outcome.signature}"
        )
    else:
        logger.error(f"Scheduled SOL request failed: {outcome.error}")
    logger.info(
        f"Statistics: total={statistics.total_requests} "
        f"successful={statistics.successful_requests} "
        f"failed={statistics.failed_requests} "
        f"success_rate={statistics.get_success_rate()}"
    )
    return outcome
