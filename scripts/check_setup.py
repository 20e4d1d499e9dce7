"""
Checks the configuration before starting the service:
address validation, RPC connectivity and balance retrieval.

python -m scripts.check_setup
"""

import asyncio
import sys
from typing import Awaitable
from typing import Callable
from typing import List
from typing import Tuple

import settings
from devnetrequester.domain.funding import validate_address
from devnetrequester.domain.funding.entities import format_balance
from devnetrequester.repository.solana_rpc_repository import SolanaRpcRepository


async def check_address(_: SolanaRpcRepository) -> bool:
    return validate_address.execute(settings.TARGET_ADDRESS)


async def check_connection(rpc_repository: SolanaRpcRepository) -> bool:
    version = await rpc_repository.get_version()
    if version is None:
        return False
    print(f"Connected to {settings.SOLANA_RPC_URL}, solana-core {version}")
    return True


async def check_balance(rpc_repository: SolanaRpcRepository) -> bool:
    balance = await rpc_repository.get_balance(settings.TARGET_ADDRESS)
    if balance is None:
        return False
    print(f"Balance retrieval successful: {format_balance(balance)} SOL")
    return True


async def main() -> int:
    checks: List[Tuple[str, Callable[[SolanaRpcRepository], Awaitable[bool]]]] = [
        ("Address Validation", check_address),
        ("Devnet Connection", check_connection),
        ("Balance Retrieval", check_balance),
    ]
    rpc_repository = SolanaRpcRepository(
        settings.SOLANA_RPC_URL, settings.SOLANA_RPC_TIMEOUT_SECONDS
    )
    passed = 0
    try:
        for name, check in checks:
            print(f"Running: {name}")
            if await check(rpc_repository):
                print("  passed")
                passed += 1
            else:
                print("  FAILED")
    finally:
        await rpc_repository.close()

    failed = len(checks) - passed
    print(f"Passed: {passed}, failed: {failed}")
    if failed:
        print("Some checks failed, please check your configuration.")
        return 1
    print("All checks passed, run `python cron_runner.py` or `python app.py`.")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
