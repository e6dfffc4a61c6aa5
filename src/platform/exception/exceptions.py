from enum import StrEnum


class ErrorKind(StrEnum):
    DOMAIN = 'Domain'
    UNAUTHORIZED = 'Unauthorized'
    PAYMENT_REQUIRED = 'PaymentRequired'
    NOT_FOUND = 'NotFound'


ERROR_KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.DOMAIN: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.PAYMENT_REQUIRED: 402,
    ErrorKind.NOT_FOUND: 404,
}


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.DOMAIN) -> None:
        self.message = message
        self.kind = kind
        self.status_code = ERROR_KIND_STATUS[kind]
        super().__init__(message)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str = 'Not authenticated') -> None:
        super().__init__(message, ErrorKind.UNAUTHORIZED)


class PaymentRequiredError(CustomBaseError):
    def __init__(self, message: str = 'Payment required') -> None:
        super().__init__(message, ErrorKind.PAYMENT_REQUIRED)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.NOT_FOUND)
