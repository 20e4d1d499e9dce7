from decimal import Decimal

import settings
from devnetrequester.domain.funding.entities import format_balance
from devnetrequester.domain.funding.funding_state import FundingState
from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository
from devnetrequester.service.entities import to_statistics_model
from devnetrequester.service.status.entities import StatusResponse

ENDPOINTS = {
    "POST /request": "Trigger SOL request",
    "GET /health": "Health check",
    "GET /balance": "Get current balance",
    "GET /stats": "Get detailed statistics",
    "GET /metrics": "Prometheus metrics",
}


async def execute(
    address: str,
    amount: Decimal,
    state: FundingState,
    rpc_repository: SolanaRpcRepository,
) -> StatusResponse:
    balance = await rpc_repository.get_balance(address)
    return StatusResponse(
        status="running",
        program=settings.PROGRAM_NAME,
        address=address,
        sol_amount=float(amount),
        current_balance=format_balance(balance),
        statistics=to_statistics_model(state.statistics.snapshot()),
        endpoints=ENDPOINTS,
    )
