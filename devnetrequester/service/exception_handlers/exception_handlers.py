from fastapi import Request
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from devnetrequester.service.error_responses import APIErrorResponse
from devnetrequester.service.error_responses import InternalServerAPIError
from devnetrequester.service.error_responses import NotFoundAPIError


def _to_json_response(error: APIErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=error.to_status_code(),
        content=jsonable_encoder(
            {
                "response": "NOK",
                "error": {
                    "status_code": error.to_status_code(),
                    "code": error.to_code(),
                    "message": error.to_message(),
                },
            }
        ),
    )


async def custom_exception_handler(request: Request, error: Exception):
    if not isinstance(error, APIErrorResponse):
        error = InternalServerAPIError()
    return _to_json_response(error)


async def http_exception_handler(request: Request, error: StarletteHTTPException):
    if error.status_code == 404:
        return _to_json_response(NotFoundAPIError(request.url.path))
    return JSONResponse(status_code=error.status_code, content={"detail": error.detail})
