import asyncio
import json
from decimal import Decimal
from typing import Dict
from typing import Optional

import aiohttp

from devnetrequester.api_logger import api_logger
from devnetrequester.domain.funding.amounts import sol_to_lamports
from devnetrequester.domain.funding.entities import FundingResult
from devnetrequester.utils.timer import async_timer

logger = api_logger.get()


def _parse_body(body: str) -> Optional[Dict]:
    try:
        parsed = json.loads(body)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


class FaucetApiRepository:
    """Client for the public devnet faucet HTTP API."""

    def __init__(self, faucet_url: str, timeout_seconds: float):
        self.faucet_url = faucet_url
        self.timeout_seconds = timeout_seconds

    @async_timer("faucet_api_repository.request_funds", logger=logger)
    async def request_funds(self, address: str, amount: Decimal) -> FundingResult:
        """
        Single POST to the faucet, no retries.

        Any response carrying a transaction signature is a success. Transport
        errors, timeouts, non 2xx statuses and bodies without a signature are
        returned as failures with the detail needed to diagnose them.
        """
        logger.info(f"Requesting {amount} SOL from faucet for address: {address}")
        try:
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                response = await session.post(
                    self.faucet_url,
                    json={"address": address, "amount": sol_to_lamports(amount)},
                    headers={"Content-Type": "application/json"},
                )
                body = await response.text()
                status = response.status
        except asyncio.TimeoutError:
            error = f"Faucet request timed out after {self.timeout_seconds} seconds"
            logger.error(f"Network error during faucet request: {error}")
            return FundingResult(success=False, error=error)
        except aiohttp.ClientError as e:
            logger.error(f"Network error during faucet request: {str(e)}")
            return FundingResult(success=False, error=str(e) or type(e).__name__)

        if not 200 <= status < 300:
            error = f"{status} - {body}"
            logger.error(
                f"Faucet request failed for address={address} amount={amount}: {error}"
            )
            return FundingResult(success=False, error=error)

        response_json = _parse_body(body)
        signature = response_json.get("signature") if response_json else None
        if not isinstance(signature, str) or not signature:
            logger.error(f"Faucet request failed, no signature returned: {body}")
            return FundingResult(success=False, error="No signature returned")

        logger.info(f"Successfully requested {amount} SOL. Transaction: {signature}")
        return FundingResult(success=True, transaction_signature=signature)
