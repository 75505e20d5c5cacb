"""
Pydantic models for records returned by the Inventory service API.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class Supplier(BaseModel):
    """A supplier as listed in the supplier table."""
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    contact: Optional[str] = None
    created_at: Optional[datetime] = None


class InventoryItem(BaseModel):
    """An inventory row as listed in the inventory table."""
    id: int
    name: str
    category: str
    quantity: int = 0
    supplier_id: Optional[int] = None
    created_at: Optional[datetime] = None
