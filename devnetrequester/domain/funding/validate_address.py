from solders.pubkey import Pubkey  # type: ignore # pylint: disable=import-error

from devnetrequester.api_logger import api_logger

logger = api_logger.get()


def execute(address: str) -> bool:
    """True if address is a base58 encoded 32 byte Solana public key."""
    if not address:
        logger.error("Invalid Solana address: empty address")
        return False
    try:
        Pubkey.from_string(address)
        return True
    except ValueError:
        logger.error(f"Invalid Solana address: {address}")
        return False
