import settings
from devnetrequester.domain.funding.funding_state import FundingState
from devnetrequester.service.entities import to_statistics_model
from devnetrequester.service.status.entities import ConfigurationModel
from devnetrequester.service.status.entities import StatsResponse


def execute(state: FundingState) -> StatsResponse:
    return StatsResponse(
        statistics=to_statistics_model(state.statistics.snapshot()),
        configuration=ConfigurationModel(
            target_address=settings.TARGET_ADDRESS,
            sol_amount=float(settings.SOL_AMOUNT),
            airdrop_max_sol=float(settings.AIRDROP_MAX_SOL),
            devnet_rpc_url=settings.SOLANA_RPC_URL,
            faucet_url=settings.FAUCET_URL,
            max_requests_per_session=state.session_limiter.limit,
            session_requests=state.session_limiter.count,
        ),
    )
