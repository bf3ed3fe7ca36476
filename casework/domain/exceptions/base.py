"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent business rule violations or
    domain-specific error conditions.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class UnauthorizedException(DomainException):
    """Raised when a write is attempted without a caller identity."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message=message, code="UNAUTHORIZED")


class InvalidRequestException(DomainException):
    """Raised when a request fails business-level validation."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_REQUEST")
