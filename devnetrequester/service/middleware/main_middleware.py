import time

from prometheus_client import Counter
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.base import RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp
from uuid_extensions import uuid7

from devnetrequester.api_logger import api_logger
from devnetrequester.service.error_responses import APIErrorResponse

logger = api_logger.get()

response_status_codes_counter = Counter(
    "response_status_codes",
    "Total number of HTTP status codes of each endpoint",
    ["endpoint", "status_code"],
)


class MainMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = str(uuid7())
        client_host = request.client.host if request.client else None
        try:
            logger.info(
                f"REQUEST STARTED "
                f"request_id={request_id} "
                f"method={request.method} "
                f"request_path={request.url.path} "
                f"ip={client_host}"
            )
            before = time.time()
            response: Response = await call_next(request)
            response_status_codes_counter.labels(
                request.url.path, response.status_code
            ).inc()

            process_time = (time.time() - before) * 1000
            logger.info(
                f"REQUEST COMPLETED "
                f"request_id={request_id} "
                f"request_path={request.url.path} "
                f"completed_in={process_time:.2f}ms "
                f"status_code={response.status_code}"
            )
            response.headers["X-Request-Id"] = request_id
            return response
        except Exception as error:
            status_code = (
                error.to_status_code() if isinstance(error, APIErrorResponse) else 500
            )
            response_status_codes_counter.labels(request.url.path, status_code).inc()
            logger.error(
                f"Error while handling request. request_id={request_id} "
                f"request_path={request.url.path} "
                f"status_code={status_code}",
                exc_info=status_code == 500,
            )
            raise error from None
