from decimal import Decimal
from typing import List

import settings
from devnetrequester.domain.funding.funding_state import FundingState
from devnetrequester.domain.funding.funding_strategy import FundingStrategy
from devnetrequester.domain.funding.funding_strategy import build_default_strategies
from devnetrequester.domain.funding.request_statistics import RequestStatistics
from devnetrequester.domain.funding.session_limiter import SessionLimiter
from devnetrequester.repository.faucet_api_repository import FaucetApiRepository
from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository

_solana_rpc_repository: SolanaRpcRepository
_faucet_api_repository: FaucetApiRepository
_funding_state: FundingState
_funding_strategies: List[FundingStrategy]


# pylint: disable=W0603
def init_globals():
    global _solana_rpc_repository
    global _faucet_api_repository
    global _funding_state
    global _funding_strategies

    _solana_rpc_repository = SolanaRpcRepository(
        settings.SOLANA_RPC_URL,
        settings.SOLANA_RPC_TIMEOUT_SECONDS,
    )
    _faucet_api_repository = FaucetApiRepository(
        settings.FAUCET_URL,
        settings.FAUCET_REQUEST_TIMEOUT_SECONDS,
    )
    _funding_state = FundingState(
        SessionLimiter(settings.MAX_REQUESTS_PER_SESSION),
        RequestStatistics(),
    )
    _funding_strategies = build_default_strategies(
        _faucet_api_repository,
        _solana_rpc_repository,
        Decimal(settings.AIRDROP_MAX_SOL),
    )


def get_solana_rpc_repository() -> SolanaRpcRepository:
    return _solana_rpc_repository


def get_faucet_api_repository() -> FaucetApiRepository:
    return _faucet_api_repository


def get_funding_state() -> FundingState:
    return _funding_state


def get_funding_strategies() -> List[FundingStrategy]:
    return _funding_strategies
