from datetime import datetime
from typing import Optional

from pydantic import Field

from devnetrequester.service.entities import CamelModel
from devnetrequester.service.entities import StatisticsModel


class RequestFundsData(CamelModel):
    method: Optional[str] = Field(
        default=None, description="Funding method used: faucet or airdrop"
    )
    signature: Optional[str] = Field(
        default=None, description="Transaction signature of the funding"
    )
    requested_amount: Optional[float] = Field(
        default=None, description="Amount of SOL requested by the last method tried"
    )
    current_balance: str = Field(
        description="Balance before the request, 4 decimals or 'unknown'"
    )
    timestamp: datetime


class RequestFundsResponse(CamelModel):
    success: bool
    skipped: bool = Field(
        default=False, description="True if the session limit was reached"
    )
    message: str
    error: Optional[str] = Field(
        default=None, description="Failure detail of the last method tried"
    )
    data: RequestFundsData
    statistics: StatisticsModel


class BalanceResponse(CamelModel):
    address: str
    balance: str = Field(description="Balance in SOL, 4 decimals or 'unknown'")
    balance_sol: Optional[float] = Field(
        default=None, description="Balance in SOL, null if unavailable"
    )
    timestamp: datetime
