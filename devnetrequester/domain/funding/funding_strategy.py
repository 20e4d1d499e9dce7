from dataclasses import dataclass
from decimal import Decimal
from typing import Awaitable
from typing import Callable
from typing import List
from typing import Optional

from devnetrequester.domain.funding.entities import FundingMethod
from devnetrequester.domain.funding.entities import FundingResult
from devnetrequester.repository.faucet_api_repository import FaucetApiRepository
from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository


@dataclass
class FundingStrategy:
    method: FundingMethod
    request_funds: Callable[[str, Decimal], Awaitable[FundingResult]]
    max_amount: Optional[Decimal] = None

    def get_amount(self, amount: Decimal) -> Decimal:
        if self.max_amount is None:
            return amount
        return min(amount, self.max_amount)


def build_default_strategies(
    faucet_repository: FaucetApiRepository,
    rpc_repository: SolanaRpcRepository,
    airdrop_max_amount: Decimal,
) -> List[FundingStrategy]:
    """Faucet API first, direct RPC airdrop as the fallback."""
    return [
        FundingStrategy(
            method=FundingMethod.FAUCET,
            request_funds=faucet_repository.request_funds,
        ),
        FundingStrategy(
            method=FundingMethod.AIRDROP,
            request_funds=rpc_repository.request_airdrop,
            max_amount=airdrop_max_amount,
        ),
    ]
