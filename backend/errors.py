"""
errors.py: Domain exceptions raised by the services layer.
Each one carries the HTTP status it maps to at the request boundary.
"""


class WellnessError(Exception):
    """Base class for errors that are safe to show to API clients."""

    status_code = 500

    def __init__(self, message: str = "Request failed"):
        super().__init__(message)
        self.message = message


class ValidationError(WellnessError):
    status_code = 400


class AuthenticationError(WellnessError):
    status_code = 401


class NotFoundError(WellnessError):
    status_code = 404


class ConflictError(WellnessError):
    status_code = 409


class StoreUnavailable(WellnessError):
    status_code = 503
