import asyncio
from decimal import Decimal
from typing import List
from typing import Optional
from typing import Tuple

from prometheus_client import Counter

from devnetrequester.api_logger import api_logger
from devnetrequester.domain.funding import balance_recheck_job
from devnetrequester.domain.funding.entities import FundingRequest
from devnetrequester.domain.funding.entities import FundingResult
from devnetrequester.domain.funding.entities import RequestOutcome
from devnetrequester.domain.funding.entities import format_balance
from devnetrequester.domain.funding.funding_state import FundingState
from devnetrequester.domain.funding.funding_strategy import FundingStrategy
from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository

logger = api_logger.get()

funding_attempts_counter = Counter(
    "funding_attempts",
    "Funding attempts by method and result",
    ["method", "result"],
)
skipped_requests_counter = Counter(
    "skipped_requests",
    "Requests skipped because the session limit was reached",
)


async def execute(
    address: str,
    amount: Decimal,
    state: FundingState,
    rpc_repository: SolanaRpcRepository,
    strategies: List[FundingStrategy],
    recheck_delay_seconds: float,
) -> RequestOutcome:
    """
    Runs one funding cycle: tries each strategy in order until one succeeds.

    Never raises, every failure ends up in a RequestOutcome with success=False.
    Skipped cycles (session limit reached) don't touch the statistics.
    """
    limiter = state.session_limiter
    if not limiter.can_request():
        skipped_requests_counter.inc()
        logger.info(
            f"Session limit reached ({limiter.count}/{limiter.limit}), skipping SOL request"
        )
        return RequestOutcome(
            success=False,
            skipped=True,
            message="Session limit reached, SOL request skipped",
        )

    limiter.record_attempt()
    state.statistics.record_attempt()
    logger.info(f"Starting SOL request #{state.statistics.total_requests}")

    current_balance: Optional[Decimal] = None
    try:
        current_balance = await _get_balance(address, rpc_repository)
        logger.info(f"Current balance: {format_balance(current_balance)} SOL")

        request, result = await _run_strategies(address, amount, strategies)
    except asyncio.CancelledError:
        state.statistics.record_failure()
        logger.warning("SOL request cancelled before completion")
        raise
    except Exception as e:
        state.statistics.record_failure()
        logger.error(f"SOL request failed with error: {str(e)}", exc_info=True)
        return RequestOutcome(
            success=False,
            message="SOL request failed with error",
            current_balance=current_balance,
            error=str(e),
        )

    if result.success:
        state.statistics.record_success()
        balance_recheck_job.schedule(
            address, current_balance, rpc_repository, recheck_delay_seconds
        )
        return RequestOutcome(
            success=True,
            message="SOL request completed successfully",
            method=request.method,
            signature=result.transaction_signature,
            current_balance=current_balance,
            requested_amount=request.amount,
        )

    state.statistics.record_failure()
    return RequestOutcome(
        success=False,
        message="SOL request failed",
        method=request.method if request else None,
        current_balance=current_balance,
        requested_amount=request.amount if request else None,
        error=result.error,
    )


async def _run_strategies(
    address: str, amount: Decimal, strategies: List[FundingStrategy]
) -> Tuple[Optional[FundingRequest], FundingResult]:
    request: Optional[FundingRequest] = None
    result = FundingResult(success=False, error="No funding methods configured")
    for i, strategy in enumerate(strategies):
        if i > 0:
            logger.info(
                f"{request.method.value} method failed, trying {strategy.method.value} method..."
            )
        request = FundingRequest(
            address=address,
            amount=strategy.get_amount(amount),
            method=strategy.method,
        )
        result = await _try_strategy(strategy, request)
        funding_attempts_counter.labels(
            strategy.method.value, "success" if result.success else "failure"
        ).inc()
        if result.success:
            break
    return request, result


async def _try_strategy(
    strategy: FundingStrategy, request: FundingRequest
) -> FundingResult:
    try:
        return await strategy.request_funds(request.address, request.amount)
    except Exception as e:
        logger.error(
            f"Unexpected error in {request.method.value} request "
            f"request_id={request.request_id} address={request.address} "
            f"amount={request.amount}: {str(e)}",
            exc_info=True,
        )
        return FundingResult(success=False, error=str(e) or type(e).__name__)


async def _get_balance(
    address: str, rpc_repository: SolanaRpcRepository
) -> Optional[Decimal]:
    # Informational only, no decision depends on it
    try:
        return await rpc_repository.get_balance(address)
    except Exception as e:
        logger.error(f"Error getting balance for {address}: {str(e)}")
        return None
