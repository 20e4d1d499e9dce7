from decimal import Decimal

from fastapi import APIRouter
from fastapi import Depends

import settings
from devnetrequester import dependencies
from devnetrequester.domain.funding.funding_state import FundingState
from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository
from devnetrequester.service.status import get_health_service
from devnetrequester.service.status import get_stats_service
from devnetrequester.service.status import get_status_service
from devnetrequester.service.status.entities import HealthResponse
from devnetrequester.service.status.entities import StatsResponse
from devnetrequester.service.status.entities import StatusResponse

TAG = "Status"
router = APIRouter()
router.tags = [TAG]


@router.get(
    "/",
    name="Status",
    description="Service status, current balance and accumulated statistics.",
    response_model=StatusResponse,
)
async def service_status(
    state: FundingState = Depends(dependencies.get_funding_state),
    rpc_repository: SolanaRpcRepository = Depends(
        dependencies.get_solana_rpc_repository
    ),
):
    return await get_status_service.execute(
        settings.TARGET_ADDRESS,
        Decimal(settings.SOL_AMOUNT),
        state,
        rpc_repository,
    )


@router.get(
    "/health",
    name="Health",
    description="Liveness probe.",
    response_model=HealthResponse,
)
async def health(state: FundingState = Depends(dependencies.get_funding_state)):
    return get_health_service.execute(state)


@router.get(
    "/stats",
    name="Statistics",
    description="Request statistics with success rate and the running configuration.",
    response_model=StatsResponse,
)
async def stats(state: FundingState = Depends(dependencies.get_funding_state)):
    return get_stats_service.execute(state)
