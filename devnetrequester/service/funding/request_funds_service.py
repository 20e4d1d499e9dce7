from datetime import UTC
from datetime import datetime
from decimal import Decimal
from typing import List

from starlette import status

from devnetrequester.api_logger import api_logger
from devnetrequester.domain.funding import request_funds_use_case
from devnetrequester.domain.funding.entities import format_balance
from devnetrequester.domain.funding.funding_state import FundingState
from devnetrequester.domain.funding.funding_strategy import FundingStrategy
from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository
from devnetrequester.service.entities import to_statistics_model
from devnetrequester.service.funding.entities import RequestFundsData
from devnetrequester.service.funding.entities import RequestFundsResponse
from devnetrequester.utils.timer import async_timer

logger = api_logger.get()


@async_timer("request_funds_service.execute", logger=logger)
async def execute(
    address: str,
    amount: Decimal,
    state: FundingState,
    rpc_repository: SolanaRpcRepository,
    strategies: List[FundingStrategy],
    recheck_delay_seconds: float,
) -> RequestFundsResponse:
    outcome = await request_funds_use_case.execute(
        address,
        amount,
        state,
        rpc_repository,
        strategies,
        recheck_delay_seconds,
    )
    return RequestFundsResponse(
        success=outcome.success,
        skipped=outcome.skipped,
        message=outcome.message,
        error=outcome.error,
        data=RequestFundsData(
            method=outcome.method.value if outcome.method else None,
            signature=outcome.signature,
            requested_amount=(
                float(outcome.requested_amount)
                if outcome.requested_amount is not None
                else None
            ),
            current_balance=format_balance(outcome.current_balance),
            timestamp=datetime.now(UTC),
        ),
        statistics=to_statistics_model(state.statistics.snapshot()),
    )


def get_status_code(response: RequestFundsResponse) -> int:
    if response.success:
        return status.HTTP_200_OK
    if response.skipped:
        return status.HTTP_429_TOO_MANY_REQUESTS
    return status.HTTP_400_BAD_REQUEST
