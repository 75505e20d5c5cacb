"""
SQLAlchemy ORM models for the Inventory service.

Defines the database schema for the suppliers and inventory tables.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from .database import Base

class Supplier(Base):
    """
    Supplier model representing a vendor that owns inventory items.

    Attributes:
        id (int): Primary key, auto-incremented supplier ID
        name (str): Supplier name
        email (str): Contact email (optional)
        phone (str): Contact phone number (optional)
        contact (str): Contact person or free-form note (optional)
        created_at (datetime): Timestamp when the supplier was created
    """
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(255), nullable=True)
    contact = Column(String(255), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class InventoryItem(Base):
    """
    Inventory item model representing a product in stock.

    Attributes:
        id (int): Primary key, auto-incremented inventory item ID
        name (str): Item name
        category (str): Item category, used for exact-match filtering
        quantity (int): Quantity available in inventory, never negative
        supplier_id (int): Owning supplier, NULL once that supplier is deleted
        created_at (datetime): Timestamp when the item was created
    """
    __tablename__ = "inventory"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    category = Column(String(255), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=0)
    supplier_id = Column(Integer, ForeignKey("suppliers.id", ondelete="SET NULL"), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
