"""
Domain errors raised by the record services.

Routes let these propagate; ``ErrorHandlerMiddleware`` turns them into
JSON responses.
"""
from typing import Any, Dict, Optional


class RecordError(Exception):
    status_code = 500
    code = "RECORD_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(RecordError):
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(RecordError):
    status_code = 400
    code = "CONFLICT"


class InvalidIdentifierError(RecordError):
    status_code = 400
    code = "INVALID_ID"
