from decimal import Decimal
from typing import Optional

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Confirmed

# pylint: disable=import-error
from solders.pubkey import Pubkey

from devnetrequester.api_logger import api_logger
from devnetrequester.domain.funding.amounts import lamports_to_sol
from devnetrequester.domain.funding.amounts import sol_to_lamports
from devnetrequester.domain.funding.entities import FundingResult
from devnetrequester.utils.timer import async_timer

logger = api_logger.get()


class SolanaRpcRepository:
    """Reads balances from and requests airdrops through a Solana RPC node."""

    def __init__(self, url: str, timeout: float):
        self.url = url
        self.client = AsyncClient(url, commitment=Confirmed, timeout=timeout)

    async def close(self):
        await self.client.close()

    @async_timer("solana_rpc_repository.get_balance", logger=logger)
    async def get_balance(self, address: str) -> Optional[Decimal]:
        """Balance in SOL, None if it could not be read."""
        try:
            response = await self.client.get_balance(Pubkey.from_string(address))
            return lamports_to_sol(response.value)
        except Exception as e:
            logger.error(f"Error getting balance for {address}: {str(e)}")
            return None

    async def get_version(self) -> Optional[str]:
        try:
            response = await self.client.get_version()
            return response.value.solana_core
        except Exception as e:
            logger.error(f"Error getting RPC node version from {self.url}: {str(e)}")
            return None

    @async_timer("solana_rpc_repository.request_airdrop", logger=logger)
    async def request_airdrop(self, address: str, amount: Decimal) -> FundingResult:
        """
        Requests an airdrop and waits until it reaches Confirmed commitment.

        Rejections, RPC errors and confirmation timeouts are all returned as a
        failed FundingResult.
        """
        logger.info(f"Requesting {amount} SOL airdrop for address: {address}")
        try:
            pubkey = Pubkey.from_string(address)
            response = await self.client.request_airdrop(
                pubkey, sol_to_lamports(amount), commitment=Confirmed
            )
            signature = response.value

            latest_blockhash = await self.client.get_latest_blockhash()
            confirmation = await self.client.confirm_transaction(
                signature,
                commitment=Confirmed,
                last_valid_block_height=latest_blockhash.value.last_valid_block_height,
            )
            status = confirmation.value[0] if confirmation.value else None
            if status is None or status.err is not None:
                reason = status.err if status else "no signature status"
                error = f"Airdrop transaction {signature} was not confirmed: {reason}"
                logger.error(f"Airdrop request failed: {error}")
                return FundingResult(success=False, error=error)

            logger.info(
                f"Successfully received {amount} SOL airdrop. Transaction: {signature}"
            )
            return FundingResult(success=True, transaction_signature=str(signature))
        except Exception as e:
            logger.error(
                f"Airdrop request failed for address={address} amount={amount}: {str(e)}"
            )
            return FundingResult(success=False, error=str(e) or type(e).__name__)
