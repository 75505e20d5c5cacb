"""
    Inventory Service API

    This module implements a FastAPI-based service for managing suppliers and the
    inventory items they own, with full CRUD operations and stock filtering,
    persisted in a relational database.

    The service exposes:
    - CRUD endpoints for suppliers under /suppliers
    - CRUD and filter endpoints for inventory under /inventory; writes are scoped
      to the supplier named in the X-Supplier-ID header
    - Health endpoint: Provides service health status for monitoring and orchestration

    Every response body is JSON. Successful calls return ``{"message", "data"}``;
    failures return ``{"message", "error"}`` or, for validation failures,
    ``{"message", "errors"}``.
"""
from typing import List, Optional
import logging
from fastapi import FastAPI, Depends, Path, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from . import crud, models, schemas
from .config import LOG_LEVEL, MAX_INT
from .database import engine, get_db
from .exceptions import InventoryServiceError, ValidationError
from .supplier_context import get_acting_supplier

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# Create database tables
models.Base.metadata.create_all(bind=engine)

app = FastAPI(title="inventory-service")


def _error_body(exc: InventoryServiceError) -> dict:
    if isinstance(exc, ValidationError):
        return schemas.ErrorResponse(message=exc.title, errors=exc.errors).model_dump(exclude_none=True)
    return schemas.ErrorResponse(message=exc.title, error=exc.detail).model_dump(exclude_none=True)


@app.exception_handler(InventoryServiceError)
async def service_error_handler(request: Request, exc: InventoryServiceError):
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part not in ("body", "query", "path", "header"))
        messages.append(f"{location}: {error['msg']}" if location else error["msg"])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(ValidationError(messages)),
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    # Details stay in the log; the caller only gets a generic message
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=schemas.ErrorResponse(
            message="Internal server error",
            error="An unexpected error occurred",
        ).model_dump(exclude_none=True),
    )


def _supplier_out(db_supplier: models.Supplier) -> schemas.Supplier:
    return schemas.Supplier.model_validate(db_supplier)

def _item_out(db_item: models.InventoryItem) -> schemas.InventoryItem:
    return schemas.InventoryItem.model_validate(db_item)


@app.get("/healthz", response_model=dict)
def health():
    """
    Health check endpoint for the inventory service.

    Returns:
        dict: {"status": "healthy"} when the service is operational.
    """
    return {"status": "healthy"}


# Suppliers

@app.get("/suppliers", response_model=schemas.ApiResponse[List[schemas.Supplier]])
def list_suppliers(db: Session = Depends(get_db)):
    """
    List all suppliers.

    Returns:
        Envelope with the list of supplier objects
    """
    suppliers = crud.get_suppliers(db)
    return schemas.ApiResponse(
        message="Suppliers retrieved successfully",
        data=[_supplier_out(s) for s in suppliers],
    )

@app.get("/suppliers/{supplier_id}", response_model=schemas.ApiResponse[schemas.Supplier])
def get_supplier(supplier_id: int = Path(le=MAX_INT), db: Session = Depends(get_db)):
    """
    Get a single supplier by ID.

    Raises:
        NotFoundError: 404 if supplier not found
    """
    db_supplier = crud.get_supplier(db, supplier_id)
    return schemas.ApiResponse(message="Supplier retrieved successfully", data=_supplier_out(db_supplier))

@app.post("/suppliers", response_model=schemas.ApiResponse[schemas.Supplier], status_code=status.HTTP_201_CREATED)
def create_supplier(supplier: schemas.SupplierCreate, db: Session = Depends(get_db)):
    """
    Create a new supplier.

    Args:
        supplier: Supplier data (name required; email, phone, contact optional)
        db: Database session (injected)

    Raises:
        ValidationError: 400 if a field is missing or exceeds 255 characters
    """
    db_supplier = crud.create_supplier(db, supplier)
    return schemas.ApiResponse(message="Supplier created successfully", data=_supplier_out(db_supplier))

@app.put("/suppliers/{supplier_id}", response_model=schemas.ApiResponse[schemas.Supplier])
def update_supplier(supplier: schemas.SupplierUpdate, supplier_id: int = Path(le=MAX_INT), db: Session = Depends(get_db)):
    """
    Replace an existing supplier's fields.

    Raises:
        NotFoundError: 404 if supplier not found
        ValidationError: 400 if a field is invalid
    """
    db_supplier = crud.update_supplier(db, supplier_id, supplier)
    return schemas.ApiResponse(message="Supplier updated successfully", data=_supplier_out(db_supplier))

@app.delete("/suppliers/{supplier_id}", response_model=schemas.ApiResponse[schemas.DeletedRecord])
def delete_supplier(supplier_id: int = Path(le=MAX_INT), db: Session = Depends(get_db)):
    """
    Delete a supplier. Its inventory items are kept with supplier_id set to null.

    Raises:
        NotFoundError: 404 if supplier not found
    """
    crud.delete_supplier(db, supplier_id)
    return schemas.ApiResponse(message="Supplier deleted successfully", data=schemas.DeletedRecord(id=supplier_id))


# Inventory

@app.get("/inventory", response_model=schemas.ApiResponse[List[schemas.InventoryItem]])
def list_inventory_items(
    db: Session = Depends(get_db),
    supplier_id: Optional[int] = Depends(get_acting_supplier)
):
    """
    List inventory items, scoped to the X-Supplier-ID header when present.

    Raises:
        ValidationError: 400 if the header names a supplier that does not exist
    """
    items = crud.get_inventory_items(db, supplier_id=supplier_id)
    return schemas.ApiResponse(message="Inventory retrieved successfully", data=[_item_out(i) for i in items])

@app.get("/inventory/filter", response_model=schemas.ApiResponse[List[schemas.InventoryItem]])
def filter_inventory_items(
    category: Optional[str] = None,
    stock: Optional[str] = None,
    db: Session = Depends(get_db),
    supplier_id: Optional[int] = Depends(get_acting_supplier)
):
    """
    Filter inventory items by exact category and/or stock level.

    Args:
        category: Category to match exactly
        stock: One of "low" (quantity < 10), "out" (quantity = 0), "in" (quantity > 0)

    Raises:
        ValidationError: 400 for an unknown stock value, an oversized category or an unknown supplier
    """
    items = crud.filter_inventory_items(db, category=category, stock=stock, supplier_id=supplier_id)
    return schemas.ApiResponse(message="Inventory filtered successfully", data=[_item_out(i) for i in items])

@app.get("/inventory/{item_id}", response_model=schemas.ApiResponse[schemas.InventoryItem])
def get_inventory_item(
    item_id: int = Path(le=MAX_INT),
    db: Session = Depends(get_db),
    supplier_id: Optional[int] = Depends(get_acting_supplier)
):
    """
    Get a single inventory item by ID.

    Raises:
        NotFoundError: 404 if item not found
        OwnershipError: 403 if X-Supplier-ID is given and does not own the item
    """
    db_item = crud.get_inventory_item(db, item_id, supplier_id=supplier_id)
    return schemas.ApiResponse(message="Inventory item retrieved successfully", data=_item_out(db_item))

@app.post("/inventory", response_model=schemas.ApiResponse[schemas.InventoryItem], status_code=status.HTTP_201_CREATED)
def create_inventory_item(
    item: schemas.InventoryItemCreate,
    db: Session = Depends(get_db),
    supplier_id: Optional[int] = Depends(get_acting_supplier)
):
    """
    Create an inventory item owned by the supplier in X-Supplier-ID.

    Raises:
        ValidationError: 400 if the header is missing, the supplier is unknown or a field is invalid
    """
    db_item = crud.create_inventory_item(db, item, supplier_id)
    return schemas.ApiResponse(message="Inventory item created successfully", data=_item_out(db_item))

@app.put("/inventory/{item_id}", response_model=schemas.ApiResponse[schemas.InventoryItem])
def update_inventory_item(
    item: schemas.InventoryItemUpdate,
    item_id: int = Path(le=MAX_INT),
    db: Session = Depends(get_db),
    supplier_id: Optional[int] = Depends(get_acting_supplier)
):
    """
    Update an inventory item owned by the supplier in X-Supplier-ID.

    Raises:
        ValidationError: 400 if the header is missing, the supplier is unknown or a field is invalid
        NotFoundError: 404 if item not found
        OwnershipError: 403 if the supplier does not own the item
    """
    db_item = crud.update_inventory_item(db, item_id, item, supplier_id)
    return schemas.ApiResponse(message="Inventory item updated successfully", data=_item_out(db_item))

@app.delete("/inventory/{item_id}", response_model=schemas.ApiResponse[schemas.DeletedRecord])
def delete_inventory_item(
    item_id: int = Path(le=MAX_INT),
    db: Session = Depends(get_db),
    supplier_id: Optional[int] = Depends(get_acting_supplier)
):
    """
    Delete an inventory item owned by the supplier in X-Supplier-ID.

    Raises:
        ValidationError: 400 if the header is missing or the supplier is unknown
        NotFoundError: 404 if item not found
        OwnershipError: 403 if the supplier does not own the item
    """
    crud.delete_inventory_item(db, item_id, supplier_id)
    return schemas.ApiResponse(message="Inventory item deleted successfully", data=schemas.DeletedRecord(id=item_id))
