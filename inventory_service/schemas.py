"""
Pydantic schemas for request/response validation in the Inventory service.

These schemas define the structure of data for API requests and responses.
Request schemas only check JSON types; required-ness and length rules live in
``validators`` so every violation can be reported at once.
"""
from datetime import datetime
from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, StrictInt

T = TypeVar("T")


class SupplierBase(BaseModel):
    """Base schema with common supplier attributes."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    contact: Optional[str] = None

class SupplierCreate(SupplierBase):
    """Schema for creating a new supplier."""
    pass

class SupplierUpdate(SupplierBase):
    """Schema for replacing an existing supplier. Omitted optional fields are cleared."""
    pass

class Supplier(SupplierBase):
    """
    Schema for supplier responses, includes all database fields.

    Attributes:
        id (int): Supplier's unique identifier
        name (str): Supplier name
        email (str): Contact email
        phone (str): Contact phone number
        contact (str): Contact person
        created_at (datetime): When the supplier was created
    """
    id: int
    name: str
    created_at: datetime

    class Config:
        from_attributes = True


class InventoryItemBase(BaseModel):
    """Base schema with common inventory item attributes."""
    name: Optional[str] = None
    category: Optional[str] = None
    quantity: Optional[StrictInt] = None

class InventoryItemCreate(InventoryItemBase):
    """Schema for creating a new inventory item. The owner comes from the X-Supplier-ID header."""
    pass

class InventoryItemUpdate(InventoryItemBase):
    """Schema for replacing an existing inventory item. An omitted quantity resets to 0."""
    pass

class InventoryItem(BaseModel):
    """
    Schema for inventory item responses, includes all database fields.

    Attributes:
        id (int): Inventory item's unique identifier
        name (str): Item name
        category (str): Item category
        quantity (int): Quantity available
        supplier_id (int): Owning supplier, None if the supplier was deleted
        created_at (datetime): When the item was created
    """
    id: int
    name: str
    category: str
    quantity: int
    supplier_id: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True


class DeletedRecord(BaseModel):
    """Payload returned after a successful delete."""
    id: int


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every successful response."""
    message: str
    data: T


class ErrorResponse(BaseModel):
    """Envelope for failed requests. Validation failures carry ``errors``, everything else ``error``."""
    message: str
    error: Optional[str] = None
    errors: Optional[List[str]] = None
