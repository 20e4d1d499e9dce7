from decimal import Decimal
from typing import List

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Response

import settings
from devnetrequester import dependencies
from devnetrequester.api_logger import api_logger
from devnetrequester.domain.funding.funding_state import FundingState
from devnetrequester.domain.funding.funding_strategy import FundingStrategy
from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository
from devnetrequester.service.funding import get_balance_service
from devnetrequester.service.funding import request_funds_service
from devnetrequester.service.funding.entities import BalanceResponse
from devnetrequester.service.funding.entities import RequestFundsResponse

TAG = "Funding"
router = APIRouter()
router.tags = [TAG]

logger = api_logger.get()


@router.post(
    "/request",
    name="Request SOL",
    description="Runs one SOL request cycle: faucet API first, direct airdrop as fallback. "
    "Returns 400 if every method failed and 429 if the session limit was reached.",
    response_model=RequestFundsResponse,
    responses={
        400: {"model": RequestFundsResponse},
        429: {"model": RequestFundsResponse},
    },
)
async def request_funds(
    response: Response,
    state: FundingState = Depends(dependencies.get_funding_state),
    rpc_repository: SolanaRpcRepository = Depends(
        dependencies.get_solana_rpc_repository
    ),
    strategies: List[FundingStrategy] = Depends(dependencies.get_funding_strategies),
):
    logger.info("SOL request triggered via API")
    result = await request_funds_service.execute(
        settings.TARGET_ADDRESS,
        Decimal(settings.SOL_AMOUNT),
        state,
        rpc_repository,
        strategies,
        settings.BALANCE_RECHECK_DELAY_SECONDS,
    )
    response.status_code = request_funds_service.get_status_code(result)
    return result


@router.get(
    "/balance",
    name="Balance",
    description="Current SOL balance of the target address.",
    response_model=BalanceResponse,
)
async def balance(
    rpc_repository: SolanaRpcRepository = Depends(
        dependencies.get_solana_rpc_repository
    ),
):
    return await get_balance_service.execute(settings.TARGET_ADDRESS, rpc_repository)
