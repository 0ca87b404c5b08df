from http import HTTPStatus
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from pydantic import ValidationError
from pymongo.errors import PyMongoError
from teamdesk.errors import RecordError
from teamdesk.utils.logger import log_error, log_warning


def error_response(status_code: int, code: str, message: str, details=None, headers=None) -> JSONResponse:
    error = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "statusCode": status_code,
            "error": error,
        },
        headers=headers,
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)

        except RecordError as re:
            log_warning(f"{request.method} {request.url.path} -> {re.status_code} {re.message}")
            return error_response(re.status_code, re.code, re.message, re.details)

        except ValidationError as ve:
            return error_response(
                422,
                "VALIDATION_ERROR",
                "Record does not match the schema",
                ve.errors(include_url=False, include_context=False, include_input=False),
            )

        except PyMongoError as pe:
            log_error(f"Store error on {request.method} {request.url.path}", pe)
            return error_response(500, "STORE_ERROR", "Internal server error")

        except Exception as e:
            log_error(f"Unhandled error on {request.method} {request.url.path}", e)
            return error_response(500, "INTERNAL_ERROR", "Internal server error")


def _clean_errors(errors):
    # ctx may hold exception instances, which are not JSON serializable
    return [
        {key: value for key, value in error.items() if key not in ("ctx", "input", "url")}
        for error in errors
    ]


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return error_response(422, "VALIDATION_ERROR", "Request is not valid", _clean_errors(exc.errors()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, str):
        return error_response(exc.status_code, "HTTP_EXCEPTION", exc.detail, headers=getattr(exc, "headers", None))
    return error_response(
        exc.status_code, "HTTP_EXCEPTION", HTTPStatus(exc.status_code).phrase, exc.detail,
        headers=getattr(exc, "headers", None),
    )
