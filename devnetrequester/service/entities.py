from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic.alias_generators import to_camel

from devnetrequester.domain.funding.request_statistics import StatisticsSnapshot


class CamelModel(BaseModel):
    """Response models are serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatisticsModel(CamelModel):
    total_requests: int = Field(description="Orchestrated attempts, skips excluded")
    successful_requests: int = Field(description="Attempts that received SOL")
    failed_requests: int = Field(description="Attempts where every method failed")
    last_request_time: Optional[datetime] = Field(
        default=None, description="Time of the last attempt"
    )
    last_success_time: Optional[datetime] = Field(
        default=None, description="Time of the last successful attempt"
    )
    start_time: datetime = Field(description="Process start time")
    uptime: int = Field(description="Process uptime in seconds")
    success_rate: str = Field(description="Successful attempts percentage, e.g. 66.67%")


def to_statistics_model(snapshot: StatisticsSnapshot) -> StatisticsModel:
    return StatisticsModel(
        total_requests=snapshot.total_requests,
        successful_requests=snapshot.successful_requests,
        failed_requests=snapshot.failed_requests,
        last_request_time=snapshot.last_request_time,
        last_success_time=snapshot.last_success_time,
        start_time=snapshot.start_time,
        uptime=snapshot.uptime,
        success_rate=snapshot.success_rate,
    )
