class ServiceError(Exception):
    """Base class for predictable service-layer exceptions."""


class InvalidDataError(ServiceError):
    """Raised when product data fails validation."""


class ResourceNotFoundError(ServiceError):
    """Raised when the requested product does not exist."""
