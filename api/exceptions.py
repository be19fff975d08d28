# api/exceptions.py
from typing import Optional

from fastapi import HTTPException


class BackendError(RuntimeError):
    """A call to the marketplace backend failed (after retries)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundException(HTTPException):
    def __init__(self, message: str = "Resource not found"):
        super().__init__(status_code=404, detail=message)


class BadGatewayException(HTTPException):
    def __init__(self, message: str = "Backend request failed"):
        super().__init__(status_code=502, detail=message)
