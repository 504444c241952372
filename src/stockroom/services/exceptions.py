"""Service layer exception classes for Stockroom.

This module defines all custom exceptions used by the service layer to provide
consistent error handling across the application.

Exception Hierarchy:
    ServiceError (base)
    ├── ValidationError
    │   └── ImageValidationError
    ├── RepositoryError
    ├── ItemNotFound
    └── AuthenticationError
"""

from typing import List, Optional


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.
    """

    pass


class ValidationError(ServiceError):
    """Raised when user input fails validation.

    No repository call is made once this is raised.

    Args:
        errors: List of human-readable error messages

    Example:
        >>> raise ValidationError(["Quantity: Value must be greater than zero"])
        ValidationError: Validation failed: Quantity: Value must be greater than zero
    """

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        error_msg = "; ".join(self.errors)
        super().__init__(f"Validation failed: {error_msg}")


class ImageValidationError(ValidationError):
    """Raised when an image file or URL is not acceptable."""

    pass


class RepositoryError(ServiceError):
    """Raised when the remote datastore rejects or fails an operation.

    Args:
        operation: Repository operation name ("list", "insert", "update", "delete")
        collection: Collection name the operation targeted
        message: Description of the failure
        original_error: The underlying exception, if any
    """

    def __init__(
        self,
        operation: str,
        collection: str,
        message: str,
        original_error: Optional[Exception] = None,
    ):
        self.operation = operation
        self.collection = collection
        self.message = message
        self.original_error = original_error
        super().__init__(f"{operation} on {collection} failed: {message}")


class ItemNotFound(ServiceError):
    """Raised when an item id is not present in the cached collection.

    Args:
        collection: Collection name
        item_id: The id that was not found
    """

    def __init__(self, collection: str, item_id: str):
        self.collection = collection
        self.item_id = item_id
        super().__init__(f"Item '{item_id}' not found in {collection}")


class AuthenticationError(ServiceError):
    """Raised when the identity provider rejects a sign-in or sign-up."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(f"Authentication failed: {message}")
