class ServiceError(Exception):
    """Base class for service-layer errors."""


class StorageError(ServiceError):
    """Raised when the school data store cannot be read."""
