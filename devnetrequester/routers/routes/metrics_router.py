from fastapi import APIRouter
from fastapi import Depends
from fastapi.responses import Response
from prometheus_client import CONTENT_TYPE_LATEST
from prometheus_client import Gauge
from prometheus_client import REGISTRY
from prometheus_client import generate_latest

from devnetrequester import dependencies
from devnetrequester.domain.funding.funding_state import FundingState

TAG = "Metrics"
router = APIRouter(prefix="/metrics")
router.tags = [TAG]

session_requests_gauge = Gauge(
    "session_requests", "Attempts made in the current session"
)
session_limit_gauge = Gauge("session_limit", "Attempts allowed per session")
successful_requests_gauge = Gauge(
    "successful_requests", "Successful SOL requests since start"
)
failed_requests_gauge = Gauge("failed_requests", "Failed SOL requests since start")


@router.get("", include_in_schema=False)
async def metrics(state: FundingState = Depends(dependencies.get_funding_state)):
    session_requests_gauge.set(state.session_limiter.count)
    session_limit_gauge.set(state.session_limiter.limit)
    successful_requests_gauge.set(state.statistics.successful_requests)
    failed_requests_gauge.set(state.statistics.failed_requests)
    return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)
