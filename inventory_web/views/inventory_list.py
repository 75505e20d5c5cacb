"""
Inventory table view.
"""
from typing import Dict, List, Optional

from ..models import InventoryItem, Supplier
from .base import Confirm, View

LIST_PATH = "/inventory"


class InventoryListView(View):
    """
    Lists inventory items with their supplier names and offers edit, delete and filtering.

    Args:
        confirm: Asks the user a yes/no question; deletes only proceed on True
    """

    displayed_columns = ["id", "name", "category", "quantity", "supplier", "actions"]

    def __init__(self, api, notifier, navigator, confirm: Confirm):
        super().__init__(api, notifier, navigator)
        self.confirm = confirm
        self.items: List[InventoryItem] = []
        self.suppliers: List[Supplier] = []

    async def init(self) -> None:
        await self.load_inventory()
        await self.load_suppliers()

    async def load_inventory(self) -> None:
        ok, items = await self._call(self.api.list_inventory(), "Failed to load inventory")
        if not ok:
            return
        self.items = items
        if not self.items:
            self.notifier.open("No inventory items available")

    async def load_suppliers(self) -> None:
        ok, suppliers = await self._call(self.api.list_suppliers(), "Failed to load suppliers")
        if ok:
            self.suppliers = suppliers

    def supplier_name(self, supplier_id: Optional[int]) -> str:
        """Name shown in the supplier column."""
        if not supplier_id:
            return "None"
        for supplier in self.suppliers:
            if supplier.id == supplier_id:
                return supplier.name
        return "Unknown"

    def _owner_of(self, item_id: int) -> Optional[int]:
        for item in self.items:
            if item.id == item_id:
                return item.supplier_id
        return None

    async def delete_item(self, item_id: int) -> bool:
        """
        Delete an item after confirmation, acting as the item's owner.

        Returns:
            True if the item was deleted
        """
        if not self.confirm("Are you sure you want to delete this item?"):
            return False
        ok, _ = await self._call(
            self.api.delete_inventory_item(item_id, supplier_id=self._owner_of(item_id)),
            "Failed to delete item",
        )
        if not ok:
            return False
        self.notifier.open("Inventory item deleted")
        await self.load_inventory()
        return True

    def edit_item(self, item_id: int) -> None:
        self.navigator.navigate(f"{LIST_PATH}/edit/{item_id}", {"id": str(item_id)})

    async def apply_filter(self, filters: Dict[str, Optional[str]]) -> None:
        ok, items = await self._call(
            self.api.filter_inventory(category=filters.get("category"), stock=filters.get("stock")),
            "Failed to apply filters",
        )
        if ok:
            self.items = items
