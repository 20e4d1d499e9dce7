import asyncio
from decimal import Decimal
from typing import Optional
from typing import Set

from devnetrequester.api_logger import api_logger
from devnetrequester.domain.funding.entities import format_balance
from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository

logger = api_logger.get()

# Keeps references so pending re-checks are not garbage collected
_pending_tasks: Set[asyncio.Task] = set()


def schedule(
    address: str,
    previous_balance: Optional[Decimal],
    rpc_repository: SolanaRpcRepository,
    delay_seconds: float,
) -> asyncio.Task:
    """
    Fire and forget: logs the balance again after delay_seconds.

    Nothing awaits the returned task, its result never changes an outcome
    that was already returned.
    """
    task = asyncio.create_task(
        execute(address, previous_balance, rpc_repository, delay_seconds)
    )
    _pending_tasks.add(task)
    task.add_done_callback(_pending_tasks.discard)
    return task


async def execute(
    address: str,
    previous_balance: Optional[Decimal],
    rpc_repository: SolanaRpcRepository,
    delay_seconds: float,
) -> None:
    try:
        await asyncio.sleep(delay_seconds)
        new_balance = await rpc_repository.get_balance(address)
        if new_balance is None:
            return
        logger.info(f"New balance: {format_balance(new_balance)} SOL")
        if previous_balance is None:
            logger.info("SOL gained: unknown")
        else:
            logger.info(f"SOL gained: {format_balance(new_balance - previous_balance)}")
    except Exception:
        logger.error("Balance re-check failed", exc_info=True)
