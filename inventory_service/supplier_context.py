"""
Acting-supplier context for the Inventory service.

The caller asserts which supplier it acts for through the ``X-Supplier-ID``
header. This is not authentication; it only scopes inventory reads and gates
inventory writes to items the supplier already owns.
"""
import logging
from typing import Optional
from fastapi import Header

from .config import MAX_INT, SUPPLIER_HEADER
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

MISSING_SUPPLIER_MESSAGE = f"Supplier ID is required in header ({SUPPLIER_HEADER})"


def parse_supplier_id(raw: Optional[str]) -> Optional[int]:
    """
    Parse a header value into a supplier id.

    Args:
        raw: Raw header value

    Returns:
        The supplier id, or None if the value is missing, non-numeric, not positive
        or larger than the id column can hold
    """
    if raw is None:
        return None
    try:
        supplier_id = int(raw.strip())
    except ValueError:
        logger.debug(f"Ignoring non-numeric {SUPPLIER_HEADER} header: {raw!r}")
        return None
    return supplier_id if 0 < supplier_id <= MAX_INT else None


def get_acting_supplier(
    x_supplier_id: Optional[str] = Header(default=None, alias=SUPPLIER_HEADER)
) -> Optional[int]:
    """
    FastAPI dependency returning the acting supplier id, if any.

    Returns:
        Supplier id from the header, or None
    """
    return parse_supplier_id(x_supplier_id)


def require_supplier_id(supplier_id: Optional[int]) -> int:
    """
    Ensure an acting supplier was supplied.

    Raises:
        ValidationError: if no valid supplier id was given
    """
    if supplier_id is None:
        raise ValidationError(MISSING_SUPPLIER_MESSAGE)
    return supplier_id
