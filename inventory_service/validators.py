"""
Field validation for the Inventory service.

Provides the business rules applied before any write: required fields,
column widths and non-negative quantities. Each function returns every
problem it finds so callers can report them together.
"""
from typing import List, Optional
from . import schemas
from .config import MAX_FIELD_LENGTH, MAX_INT, LOW_STOCK_THRESHOLD

STOCK_FILTERS = ("low", "out", "in")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _check_length(errors: List[str], label: str, value: Optional[str]) -> None:
    if value is not None and len(value) > MAX_FIELD_LENGTH:
        errors.append(f"{label} cannot exceed {MAX_FIELD_LENGTH} characters")


def validate_supplier_data(data: schemas.SupplierBase) -> List[str]:
    """
    Validate supplier fields.

    Args:
        data: Supplier payload

    Returns:
        List of error messages, empty when the payload is valid
    """
    errors = []

    if _is_blank(data.name):
        errors.append("Name is required")
    _check_length(errors, "Name", data.name)
    _check_length(errors, "Email", data.email)
    _check_length(errors, "Phone", data.phone)
    _check_length(errors, "Contact", data.contact)

    return errors


def validate_inventory_data(data: schemas.InventoryItemBase) -> List[str]:
    """
    Validate inventory item fields.

    Args:
        data: Inventory item payload

    Returns:
        List of error messages, empty when the payload is valid
    """
    errors = []

    if _is_blank(data.name):
        errors.append("Name is required")
    if _is_blank(data.category):
        errors.append("Category is required")
    _check_length(errors, "Name", data.name)
    _check_length(errors, "Category", data.category)
    if data.quantity is not None and data.quantity < 0:
        errors.append("Quantity must be a non-negative number")
    if data.quantity is not None and data.quantity > MAX_INT:
        errors.append(f"Quantity cannot exceed {MAX_INT}")

    return errors


def validate_stock_filter(stock: Optional[str]) -> List[str]:
    """
    Validate the ``stock`` query parameter.

    ``low`` means quantity below LOW_STOCK_THRESHOLD, ``out`` means zero and
    ``in`` means anything above zero.
    """
    if stock and stock not in STOCK_FILTERS:
        return ["Invalid stock filter. Use low, out, or in"]
    return []


def validate_category_filter(category: Optional[str]) -> List[str]:
    if category and len(category) > MAX_FIELD_LENGTH:
        return ["Invalid category"]
    return []


def describe_stock_filter(stock: str) -> str:
    """Human-readable label used in log lines."""
    return {
        "low": f"quantity < {LOW_STOCK_THRESHOLD}",
        "out": "quantity = 0",
        "in": "quantity > 0",
    }[stock]
