#!/usr/bin/env python3
"""
Error kinds shared by the engine, the repositories and the web layer.

The web layer maps each kind to an HTTP status in web/backend/exceptions.py.
"""


class CareerServiceError(Exception):
    """Base exception for service layer errors."""
    status_code = 500
    retryable = False

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(CareerServiceError):
    """Raised when input is missing or malformed."""
    status_code = 400


class AuthenticationError(CareerServiceError):
    """Raised when a bearer token is missing or cannot be verified."""
    status_code = 401


class PermissionDenied(CareerServiceError):
    """Raised when the caller's role or ownership does not allow the action."""
    status_code = 403


class NotFound(CareerServiceError):
    """Raised when a referenced entity does not exist."""
    status_code = 404


class EligibilityDenied(CareerServiceError):
    """Raised when a business rule forbids the action; carries the reason."""
    status_code = 400

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ConflictError(CareerServiceError):
    """Raised when a limit-guarded write lost a race. Safe to retry."""
    status_code = 409
    retryable = True


class DependencyUnavailable(CareerServiceError):
    """Raised when the store or identity provider fails or times out."""
    status_code = 503
    retryable = True


class InternalError(CareerServiceError):
    """Raised for unexpected failures; callers only see a generic message."""
    status_code = 500
