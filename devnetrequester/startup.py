import sys

import settings
from devnetrequester.api_logger import api_logger
from devnetrequester.domain.funding import validate_address
from devnetrequester.domain.funding.entities import format_balance
from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository

logger = api_logger.get()


def log_banner(mode: str) -> None:
    logger.info(f"{settings.PROGRAM_NAME} started in {mode} mode")
    logger.info(f"Target Address: {settings.TARGET_ADDRESS}")
    logger.info(f"SOL Amount per request: {settings.SOL_AMOUNT}")
    logger.info(f"Max requests per session: {settings.MAX_REQUESTS_PER_SESSION}")


def validate_target_address_or_exit() -> None:
    """An invalid target address is the only fatal configuration error."""
    if not validate_address.execute(settings.TARGET_ADDRESS):
        logger.error("Invalid target address. Exiting...")
        sys.exit(1)


async def log_initial_balance(rpc_repository: SolanaRpcRepository) -> None:
    balance = await rpc_repository.get_balance(settings.TARGET_ADDRESS)
    logger.info(f"Initial balance: {format_balance(balance)} SOL")
