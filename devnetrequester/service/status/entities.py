from datetime import datetime
from typing import Dict

from pydantic import Field

from devnetrequester.service.entities import CamelModel
from devnetrequester.service.entities import StatisticsModel


class StatusResponse(CamelModel):
    status: str
    program: str
    address: str
    sol_amount: float = Field(description="SOL requested from the faucet per cycle")
    current_balance: str = Field(description="4 decimals or 'unknown'")
    statistics: StatisticsModel
    endpoints: Dict[str, str]


class HealthResponse(CamelModel):
    status: str
    timestamp: datetime
    uptime: int = Field(description="Process uptime in seconds")


class ConfigurationModel(CamelModel):
    target_address: str
    sol_amount: float
    airdrop_max_sol: float
    devnet_rpc_url: str
    faucet_url: str
    max_requests_per_session: int
    session_requests: int = Field(description="Attempts made in the current session")


class StatsResponse(CamelModel):
    statistics: StatisticsModel
    configuration: ConfigurationModel
