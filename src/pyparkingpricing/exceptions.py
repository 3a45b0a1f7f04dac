"""Library exceptions."""


class PyParkingPricingError(Exception):
    """Base exception for the library."""


class AuthError(PyParkingPricingError):
    """Raised when authentication fails."""


class NetworkError(PyParkingPricingError):
    """Raised when network communication fails."""


class ValidationError(PyParkingPricingError):
    """Raised when inputs fail validation."""


class ApiError(PyParkingPricingError):
    """Raised when the pricing backend returns an error or an unusable response."""


class NotFoundError(ApiError):
    """Raised when the pricing backend has no record for the request."""
