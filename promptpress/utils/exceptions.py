from fastapi import HTTPException, status
from typing import Optional


class APIException(HTTPException):
    """API error carrying a machine-readable code."""

    def __init__(self, status_code: int, code: str, message: Optional[str] = None):
        detail = {"code": code, "message": message or "An error occurred"}
        super().__init__(status_code=status_code, detail=detail)


class NotFoundError(APIException):
    """404, e.g. unknown model name in the price table."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND, code=code, message=message
        )


class PayloadTooLargeError(APIException):
    """413, text longer than MAX_TEXT_LENGTH."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            code=code,
            message=message,
        )


class ServerError(APIException):
    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=code,
            message=message,
        )
