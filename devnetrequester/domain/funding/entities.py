from dataclasses import dataclass
from dataclasses import field
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID

from uuid_extensions import uuid7

UNKNOWN_BALANCE = "unknown"


class FundingMethod(str, Enum):
    FAUCET = "faucet"
    AIRDROP = "airdrop"


@dataclass
class FundingRequest:
    """A single funding attempt against one method, never persisted."""

    address: str
    amount: Decimal
    method: FundingMethod
    request_id: UUID = field(default_factory=uuid7)


@dataclass
class FundingResult:
    success: bool
    transaction_signature: Optional[str] = None
    error: Optional[str] = None


@dataclass
class RequestOutcome:
    success: bool
    message: str
    skipped: bool = False
    method: Optional[FundingMethod] = None
    signature: Optional[str] = None
    current_balance: Optional[Decimal] = None
    requested_amount: Optional[Decimal] = None
    error: Optional[str] = None


def format_balance(balance: Optional[Decimal]) -> str:
    if balance is None:
        return UNKNOWN_BALANCE
    return f"{balance:.4f}"
