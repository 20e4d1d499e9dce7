from dataclasses import dataclass
from datetime import UTC
from datetime import datetime
from typing import Optional


@dataclass
class StatisticsSnapshot:
    total_requests: int
    successful_requests: int
    failed_requests: int
    last_request_time: Optional[datetime]
    last_success_time: Optional[datetime]
    start_time: datetime
    uptime: int
    success_rate: str


class RequestStatistics:
    """Process wide request counters, lost on restart."""

    def __init__(self, start_time: Optional[datetime] = None):
        self.start_time = start_time or datetime.now(UTC)
        self.total_requests = 0
        self.successful_requests = 0
        self.failed_requests = 0
        self.last_request_time: Optional[datetime] = None
        self.last_success_time: Optional[datetime] = None

    def record_attempt(self) -> None:
        self.total_requests += 1
        self.last_request_time = datetime.now(UTC)

    def record_success(self) -> None:
        self.successful_requests += 1
        self.last_success_time = datetime.now(UTC)

    def record_failure(self) -> None:
        self.failed_requests += 1

    def get_uptime_seconds(self) -> int:
        return int((datetime.now(UTC) - self.start_time).total_seconds())

    def get_success_rate(self) -> str:
        if not self.total_requests:
            return "0%"
        rate = self.successful_requests / self.total_requests * 100
        return f"{rate:.2f}%"

    def snapshot(self) -> StatisticsSnapshot:
        return StatisticsSnapshot(
            total_requests=self.total_requests,
            successful_requests=self.successful_requests,
            failed_requests=self.failed_requests,
            last_request_time=self.last_request_time,
            last_success_time=self.last_success_time,
            start_time=self.start_time,
            uptime=self.get_uptime_seconds(),
            success_rate=self.get_success_rate(),
        )
