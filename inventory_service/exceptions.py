"""
Error taxonomy for the Inventory service.

Store operations raise these; the API layer turns them into HTTP responses.
"""
from typing import List, Optional


class InventoryServiceError(Exception):
    """Base class for errors with a known HTTP mapping."""
    status_code = 500
    title = "Internal server error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(InventoryServiceError):
    """Missing, oversized or malformed input. Holds every message found."""
    status_code = 400
    title = "Validation failed"

    def __init__(self, errors, detail: Optional[str] = None):
        if isinstance(errors, str):
            errors = [errors]
        self.errors: List[str] = list(errors)
        super().__init__(detail or "; ".join(self.errors))


class NotFoundError(InventoryServiceError):
    status_code = 404
    title = "Not found"


class OwnershipError(InventoryServiceError):
    """The acting supplier does not own the target inventory item."""
    status_code = 403
    title = "Forbidden"


class DuplicateError(InventoryServiceError):
    status_code = 409
    title = "Conflict"
