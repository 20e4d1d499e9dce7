from datetime import UTC
from datetime import datetime

from devnetrequester.domain.funding.entities import format_balance
from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository
from devnetrequester.service.funding.entities import BalanceResponse


async def execute(address: str, rpc_repository: SolanaRpcRepository) -> BalanceResponse:
    balance = await rpc_repository.get_balance(address)
    return BalanceResponse(
        address=address,
        balance=format_balance(balance),
        balance_sol=float(balance) if balance is not None else None,
        timestamp=datetime.now(UTC),
    )
