"""
HTTP client for communicating with the Inventory service.

Wraps every REST route of the service in a coroutine that unwraps the
``{"message", "data"}`` envelope and raises ApiError on failure.
"""
import logging
from typing import Any, Dict, List, Optional, Type
import httpx
from pydantic import BaseModel, ValidationError

from ..config import INVENTORY_API_URL, TIMEOUT
from ..models import InventoryItem, Supplier

logger = logging.getLogger(__name__)

SUPPLIER_HEADER = "X-Supplier-ID"


class ApiError(Exception):
    """
    A request to the Inventory service failed.

    Attributes:
        status_code: HTTP status, or None when the service was unreachable
        message: Error text from the response body
        errors: Itemized validation messages, if any
    """

    def __init__(self, status_code: Optional[int], message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = errors or []


def _parse(model: Type[BaseModel], data: Any) -> Any:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error(f"Malformed {model.__name__} in response: {e}")
        raise ApiError(None, "Malformed response from inventory service") from e


def _parse_list(model: Type[BaseModel], data: Any) -> List[Any]:
    if not isinstance(data, list):
        logger.error(f"Expected a list of {model.__name__}, got {type(data).__name__}")
        raise ApiError(None, "Malformed response from inventory service")
    return [_parse(model, row) for row in data]


class InventoryApiClient:
    """
    Async client for the Inventory service REST API.

    Args:
        base_url: Service root URL
        timeout: Per-request timeout in seconds
        transport: Optional httpx transport, used to route requests in-process
    """

    def __init__(self, base_url: str = INVENTORY_API_URL, timeout: float = TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    async def _request(self, method: str, path: str, supplier_id: Optional[int] = None, **kwargs) -> Any:
        headers = {SUPPLIER_HEADER: str(supplier_id)} if supplier_id else None
        try:
            async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout,
                                         transport=self._transport) as client:
                response = await client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise ApiError(None, f"Inventory service error: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.is_error:
            message = body.get("error") or body.get("message") or response.reason_phrase
            logger.warning(f"{method} {path} returned {response.status_code}: {message}")
            raise ApiError(response.status_code, message, body.get("errors"))

        return body.get("data")

    # Inventory

    async def list_inventory(self, supplier_id: Optional[int] = None) -> List[InventoryItem]:
        """
        Retrieve all inventory items, scoped to a supplier when one is given.
        """
        data = await self._request("GET", "/inventory", supplier_id=supplier_id)
        return _parse_list(InventoryItem, data)

    async def get_inventory_item(self, item_id: int, supplier_id: Optional[int] = None) -> InventoryItem:
        data = await self._request("GET", f"/inventory/{item_id}", supplier_id=supplier_id)
        return _parse(InventoryItem, data)

    async def filter_inventory(self, category: Optional[str] = None, stock: Optional[str] = None,
                               supplier_id: Optional[int] = None) -> List[InventoryItem]:
        """
        Filter inventory by category and stock level. Empty values are not sent.
        """
        params = {}
        if category:
            params["category"] = category
        if stock:
            params["stock"] = stock
        data = await self._request("GET", "/inventory/filter", supplier_id=supplier_id, params=params)
        return _parse_list(InventoryItem, data)

    async def create_inventory_item(self, item: Dict[str, Any], supplier_id: Optional[int]) -> InventoryItem:
        """
        Create an inventory item owned by ``supplier_id``.
        """
        data = await self._request("POST", "/inventory", supplier_id=supplier_id, json=item)
        return _parse(InventoryItem, data)

    async def update_inventory_item(self, item_id: int, item: Dict[str, Any], supplier_id: Optional[int]) -> InventoryItem:
        data = await self._request("PUT", f"/inventory/{item_id}", supplier_id=supplier_id, json=item)
        return _parse(InventoryItem, data)

    async def delete_inventory_item(self, item_id: int, supplier_id: Optional[int]) -> None:
        await self._request("DELETE", f"/inventory/{item_id}", supplier_id=supplier_id)

    # Suppliers

    async def list_suppliers(self) -> List[Supplier]:
        data = await self._request("GET", "/suppliers")
        return _parse_list(Supplier, data)

    async def get_supplier(self, supplier_id: int) -> Supplier:
        data = await self._request("GET", f"/suppliers/{supplier_id}")
        return _parse(Supplier, data)

    async def create_supplier(self, supplier: Dict[str, Any]) -> Supplier:
        data = await self._request("POST", "/suppliers", json=supplier)
        return _parse(Supplier, data)

    async def update_supplier(self, supplier_id: int, supplier: Dict[str, Any]) -> Supplier:
        data = await self._request("PUT", f"/suppliers/{supplier_id}", json=supplier)
        return _parse(Supplier, data)

    async def delete_supplier(self, supplier_id: int) -> None:
        await self._request("DELETE", f"/suppliers/{supplier_id}")
