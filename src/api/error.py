from fastapi import status
from src.shared.result import Error

# Business error codes answered with a client error status
CLIENT_ERROR_STATUS = {
    "VALIDATION_FAILED": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "UNKNOWN_SITE": status.HTTP_404_NOT_FOUND,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def raise_for_error(error: Error):
    """Raise the API error for a failed use case result"""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is not None:
        raise ClientError(error, status_code=status_code)
    raise ServerError(error)
