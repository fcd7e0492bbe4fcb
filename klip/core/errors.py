from fastapi import status


class KlipError(Exception):
    """Base class for errors surfaced to API callers with a stable code."""

    code = "INTERNAL_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(KlipError):
    code = "INVALID_INPUT"
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthorized(KlipError):
    code = "UNAUTHORIZED"
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(KlipError):
    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(KlipError):
    code = "CONFLICT"
    status_code = status.HTTP_409_CONFLICT
