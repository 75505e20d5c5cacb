"""
CRUD (Create, Read, Update, Delete) operations for the Inventory service.

This module contains all database operations for suppliers and inventory.
Every function receives the request's session; inventory functions also
receive the acting supplier id taken from the X-Supplier-ID header.
Failures are raised as the exceptions defined in ``exceptions``.
"""
from typing import List, Optional
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from . import models, schemas, validators
from .config import LOW_STOCK_THRESHOLD
from .exceptions import DuplicateError, NotFoundError, OwnershipError, ValidationError
from .supplier_context import require_supplier_id

# Set up logging
logger = logging.getLogger(__name__)

SUPPLIER_NOT_FOUND = "Supplier not found"
SUPPLIER_DOES_NOT_EXIST = "Supplier does not exist"
ITEM_NOT_FOUND = "Inventory item not found"
NOT_OWNER = "Inventory item does not belong to this supplier"


def _commit(db: Session) -> None:
    """Commit the session, turning unique-constraint violations into DuplicateError."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity error on commit: {e.orig}")
        raise DuplicateError("Duplicate entry detected") from e


def _raise_if_invalid(errors: List[str]) -> None:
    if errors:
        raise ValidationError(errors)


# Suppliers

def supplier_exists(db: Session, supplier_id: int) -> bool:
    """
    Check whether a supplier row exists.

    Args:
        db: Database session
        supplier_id: ID of the supplier

    Returns:
        True if the supplier exists
    """
    return db.query(models.Supplier.id).filter(models.Supplier.id == supplier_id).first() is not None

def get_suppliers(db: Session) -> List[models.Supplier]:
    """
    Retrieve all suppliers.

    Args:
        db: Database session

    Returns:
        List of Supplier objects ordered by ID
    """
    return db.query(models.Supplier).order_by(models.Supplier.id).all()

def get_supplier(db: Session, supplier_id: int) -> models.Supplier:
    """
    Retrieve a single supplier by ID.

    Args:
        db: Database session
        supplier_id: ID of the supplier to retrieve

    Returns:
        Supplier object

    Raises:
        NotFoundError: if no supplier has this ID
    """
    db_supplier = db.query(models.Supplier).filter(models.Supplier.id == supplier_id).first()
    if db_supplier is None:
        raise NotFoundError(SUPPLIER_NOT_FOUND)
    return db_supplier

def create_supplier(db: Session, supplier: schemas.SupplierCreate) -> models.Supplier:
    """
    Create a new supplier in the database.

    Args:
        db: Database session
        supplier: Supplier data to create

    Returns:
        Created Supplier object with its generated ID and timestamp

    Raises:
        ValidationError: if a field is missing or too long
    """
    _raise_if_invalid(validators.validate_supplier_data(supplier))

    db_supplier = models.Supplier(
        name=supplier.name,
        email=supplier.email,
        phone=supplier.phone,
        contact=supplier.contact,
    )
    db.add(db_supplier)
    _commit(db)
    db.refresh(db_supplier)
    logger.info(f"Created supplier {db_supplier.id} '{db_supplier.name}'")
    return db_supplier

def update_supplier(db: Session, supplier_id: int, supplier: schemas.SupplierUpdate) -> models.Supplier:
    """
    Replace the fields of an existing supplier.

    Args:
        db: Database session
        supplier_id: ID of the supplier to update
        supplier: New supplier data; omitted optional fields are cleared

    Returns:
        Updated Supplier object

    Raises:
        NotFoundError: if no supplier has this ID
        ValidationError: if a field is missing or too long
    """
    db_supplier = get_supplier(db, supplier_id)
    _raise_if_invalid(validators.validate_supplier_data(supplier))

    for key, value in supplier.model_dump().items():
        setattr(db_supplier, key, value)

    _commit(db)
    db.refresh(db_supplier)
    logger.info(f"Updated supplier {supplier_id}")
    return db_supplier

def delete_supplier(db: Session, supplier_id: int) -> None:
    """
    Delete a supplier, detaching its inventory items first.

    Items that referenced the supplier keep existing with ``supplier_id``
    set to NULL. Both statements are committed together.

    Args:
        db: Database session
        supplier_id: ID of the supplier to delete

    Raises:
        NotFoundError: if no supplier has this ID
    """
    db_supplier = get_supplier(db, supplier_id)

    detached = (
        db.query(models.InventoryItem)
        .filter(models.InventoryItem.supplier_id == supplier_id)
        .update({models.InventoryItem.supplier_id: None}, synchronize_session="fetch")
    )
    db.delete(db_supplier)
    _commit(db)
    logger.info(f"Deleted supplier {supplier_id}, detached {detached} inventory item(s)")


# Inventory

def _ensure_supplier(db: Session, supplier_id: int) -> None:
    if not supplier_exists(db, supplier_id):
        raise ValidationError(SUPPLIER_DOES_NOT_EXIST)

def _get_owned_item(db: Session, item_id: int, supplier_id: Optional[int]) -> models.InventoryItem:
    """
    Load an item for mutation: supplier present and existing, item exists, supplier owns it.
    """
    supplier_id = require_supplier_id(supplier_id)
    _ensure_supplier(db, supplier_id)

    db_item = db.query(models.InventoryItem).filter(models.InventoryItem.id == item_id).first()
    if db_item is None:
        raise NotFoundError(ITEM_NOT_FOUND)
    if db_item.supplier_id != supplier_id:
        logger.warning(f"Supplier {supplier_id} attempted to modify inventory item {item_id} owned by {db_item.supplier_id}")
        raise OwnershipError(NOT_OWNER)
    return db_item

def get_inventory_items(db: Session, supplier_id: Optional[int] = None) -> List[models.InventoryItem]:
    """
    Retrieve inventory items, optionally only those owned by one supplier.

    Args:
        db: Database session
        supplier_id: Acting supplier; when given, the list is scoped to it

    Returns:
        List of InventoryItem objects ordered by ID

    Raises:
        ValidationError: if the supplier does not exist
    """
    query = db.query(models.InventoryItem)
    if supplier_id is not None:
        _ensure_supplier(db, supplier_id)
        query = query.filter(models.InventoryItem.supplier_id == supplier_id)
    return query.order_by(models.InventoryItem.id).all()

def get_inventory_item(db: Session, item_id: int, supplier_id: Optional[int] = None) -> models.InventoryItem:
    """
    Retrieve a single inventory item by ID.

    Args:
        db: Database session
        item_id: ID of the inventory item to retrieve
        supplier_id: Acting supplier; when given, it must own the item

    Returns:
        InventoryItem object

    Raises:
        NotFoundError: if the item does not exist
        OwnershipError: if the acting supplier does not own the item
    """
    db_item = db.query(models.InventoryItem).filter(models.InventoryItem.id == item_id).first()
    if db_item is None:
        raise NotFoundError(ITEM_NOT_FOUND)
    if supplier_id is not None and db_item.supplier_id != supplier_id:
        raise OwnershipError(NOT_OWNER)
    return db_item

def create_inventory_item(db: Session, item: schemas.InventoryItemCreate, supplier_id: Optional[int]) -> models.InventoryItem:
    """
    Create a new inventory item owned by the acting supplier.

    Args:
        db: Database session
        item: Inventory item data to create
        supplier_id: Acting supplier, becomes the item's owner

    Returns:
        Created InventoryItem object

    Raises:
        ValidationError: if the supplier is missing or unknown, or a field is invalid
    """
    supplier_id = require_supplier_id(supplier_id)
    _ensure_supplier(db, supplier_id)
    _raise_if_invalid(validators.validate_inventory_data(item))

    db_item = models.InventoryItem(
        name=item.name,
        category=item.category,
        quantity=item.quantity if item.quantity is not None else 0,
        supplier_id=supplier_id,
    )
    db.add(db_item)
    _commit(db)
    db.refresh(db_item)
    logger.info(f"Supplier {supplier_id} created inventory item {db_item.id} '{db_item.name}'")
    return db_item

def update_inventory_item(db: Session, item_id: int, item: schemas.InventoryItemUpdate, supplier_id: Optional[int]) -> models.InventoryItem:
    """
    Replace the fields of an inventory item owned by the acting supplier.

    Ownership never changes through an update.

    Args:
        db: Database session
        item_id: ID of the inventory item to update
        item: New item data; an omitted quantity resets to 0
        supplier_id: Acting supplier, must own the item

    Returns:
        Updated InventoryItem object

    Raises:
        ValidationError: if the supplier is missing or unknown, or a field is invalid
        NotFoundError: if the item does not exist
        OwnershipError: if the acting supplier does not own the item
    """
    db_item = _get_owned_item(db, item_id, supplier_id)
    _raise_if_invalid(validators.validate_inventory_data(item))

    db_item.name = item.name
    db_item.category = item.category
    db_item.quantity = item.quantity if item.quantity is not None else 0

    _commit(db)
    db.refresh(db_item)
    logger.info(f"Supplier {supplier_id} updated inventory item {item_id}")
    return db_item

def delete_inventory_item(db: Session, item_id: int, supplier_id: Optional[int]) -> None:
    """
    Delete an inventory item owned by the acting supplier.

    Args:
        db: Database session
        item_id: ID of the inventory item to delete
        supplier_id: Acting supplier, must own the item

    Raises:
        ValidationError: if the supplier is missing or unknown
        NotFoundError: if the item does not exist
        OwnershipError: if the acting supplier does not own the item
    """
    db_item = _get_owned_item(db, item_id, supplier_id)
    db.delete(db_item)
    _commit(db)
    logger.info(f"Supplier {supplier_id} deleted inventory item {item_id}")

def filter_inventory_items(
    db: Session,
    category: Optional[str] = None,
    stock: Optional[str] = None,
    supplier_id: Optional[int] = None,
) -> List[models.InventoryItem]:
    """
    Filter inventory items by category and stock level.

    Args:
        db: Database session
        category: Exact category to match
        stock: ``low`` (below threshold), ``out`` (zero) or ``in`` (above zero)
        supplier_id: Acting supplier; when given, results are scoped to it

    Returns:
        Matching InventoryItem objects ordered by ID

    Raises:
        ValidationError: if the supplier is unknown or a filter value is invalid
    """
    query = db.query(models.InventoryItem)

    if supplier_id is not None:
        _ensure_supplier(db, supplier_id)
        query = query.filter(models.InventoryItem.supplier_id == supplier_id)

    _raise_if_invalid(validators.validate_category_filter(category))
    if category:
        query = query.filter(models.InventoryItem.category == category)

    _raise_if_invalid(validators.validate_stock_filter(stock))
    if stock == "low":
        query = query.filter(models.InventoryItem.quantity < LOW_STOCK_THRESHOLD)
    elif stock == "out":
        query = query.filter(models.InventoryItem.quantity == 0)
    elif stock == "in":
        query = query.filter(models.InventoryItem.quantity > 0)

    if stock:
        logger.debug(f"Filtering inventory on {validators.describe_stock_filter(stock)}")
    return query.order_by(models.InventoryItem.id).all()
