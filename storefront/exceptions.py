"""
Application error taxonomy

Every error carries the HTTP status it maps to; the handlers in
``storefront.main`` turn them into responses.
"""
from typing import Optional


class AppError(Exception):
    """Base exception for operational errors surfaced to the client"""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    @property
    def status(self) -> str:
        return "fail" if 400 <= self.status_code < 500 else "error"


class ValidationError(AppError):
    """Malformed input: empty item list, non-positive quantity"""
    status_code = 400


class ConflictError(AppError):
    """A uniqueness rule would be broken (second active order, duplicate product id)"""
    status_code = 400


class InvalidStateError(AppError):
    """Operation not allowed in the order's current status"""
    status_code = 400


class UnauthorizedError(AppError):
    """Missing or invalid credentials"""
    status_code = 401


class ForbiddenError(AppError):
    """Authenticated but not allowed to touch this resource"""
    status_code = 403


class NotFoundError(AppError):
    """Order, order item or product missing"""
    status_code = 404
