from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


ERROR_STATUS_CODES = {
    "TENANT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "BARBERSHOP_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INSUFFICIENT_ROLE": status.HTTP_403_FORBIDDEN,
    "CANNOT_MODIFY_SELF": status.HTTP_403_FORBIDDEN,
    "INVALID_STATUS": status.HTTP_409_CONFLICT,
    "TENANT_STATE_CHANGED": status.HTTP_409_CONFLICT,
    "EMAIL_ALREADY_IN_USE": status.HTTP_409_CONFLICT,
    "SUBSCRIPTION_CANCELLED": status.HTTP_409_CONFLICT,
    "USER_OWNS_BARBERSHOP": status.HTTP_409_CONFLICT,
    "PAYMENT_PROOF_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "REASON_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "REFUND_PROOF_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "REFUND_NOTE_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "NAME_REQUIRED": status.HTTP_400_BAD_REQUEST,
    "ADDRESS_REQUIRED": status.HTTP_400_BAD_REQUEST,
}


def error_to_exception(error: Error) -> Exception:
    """Map a use case error to the exception the handlers render"""
    status_code = ERROR_STATUS_CODES.get(error.code)
    if status_code is None:
        return ServerError(error)
    return ClientError(error, status_code=status_code)
