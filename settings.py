import os
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(".") / ".env"
load_dotenv(dotenv_path=env_path)

ENVIRONMENT = os.getenv("PLATFORM_ENVIRONMENT", "local")


def is_production():
    return ENVIRONMENT == "production"


def is_test():
    return ENVIRONMENT == "test"


APPLICATION_NAME = "DEVNET_REQUESTER"
PROGRAM_NAME = "Auto Devnet SOL Request Service"
API_HOST = os.getenv("API_HOST", "0.0.0.0")
# Hosting providers (e.g. Render) inject the port as PORT
API_PORT = int(os.getenv("PORT", 10000))
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*")
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", "logs/devnet-requests.log")

TARGET_ADDRESS = os.getenv(
    "TARGET_ADDRESS", "2gAwqZmY7nRi9XCNQs3CjfSzDiVe5npwK3yS7ijo3E8h"
)
SOLANA_RPC_URL = os.getenv("SOLANA_RPC_URL", "https://api.devnet.solana.com")
SOLANA_RPC_TIMEOUT_SECONDS = float(os.getenv("SOLANA_RPC_TIMEOUT_SECONDS", 30))
FAUCET_URL = os.getenv("FAUCET_URL", "https://faucet.solana.com/api/airdrop")
FAUCET_REQUEST_TIMEOUT_SECONDS = float(
    os.getenv("FAUCET_REQUEST_TIMEOUT_SECONDS", 30)
)

# Amounts in SOL
SOL_AMOUNT = os.getenv("SOL_AMOUNT", "5")
# Direct airdrops are capped lower than the faucet API
AIRDROP_MAX_SOL = os.getenv("AIRDROP_MAX_SOL", "2")

# Delay before logging the balance again after a successful request
BALANCE_RECHECK_DELAY_SECONDS = float(os.getenv("BALANCE_RECHECK_DELAY_SECONDS", 5))

# Session limiter: attempts allowed between two resets
MAX_REQUESTS_PER_SESSION = int(os.getenv("MAX_REQUESTS_PER_SESSION", "2"))
REQUEST_INTERVAL_SECONDS = int(os.getenv("REQUEST_INTERVAL_SECONDS", 8 * 3600))
SESSION_RESET_INTERVAL_SECONDS = int(
    os.getenv("SESSION_RESET_INTERVAL_SECONDS", 24 * 3600)
)
