"""
Create/edit form for inventory items.
"""
from typing import List, Optional

from ..forms import Form, FormField, text_field
from ..models import Supplier
from .base import View
from .inventory_list import LIST_PATH


class InventoryFormView(View):
    """
    Inventory item form. Edits the item named by the ``id`` route parameter,
    otherwise creates a new one. The selected supplier is the acting supplier
    for the request.
    """

    def __init__(self, api, notifier, navigator):
        super().__init__(api, notifier, navigator)
        self.form = Form(
            name=text_field(required=True),
            category=text_field(required=True),
            quantity=FormField(default=0, required=True, min_value=0, coerce=int),
            supplier_id=FormField(default=None, coerce=int),
        )
        self.suppliers: List[Supplier] = []
        self.is_edit_mode = False
        self.item_id: Optional[int] = None

    async def init(self) -> None:
        await self.load_suppliers()
        item_id = self.navigator.params.get("id")
        if item_id:
            self.is_edit_mode = True
            self.item_id = int(item_id)
            await self.load_item(self.item_id)

    async def load_suppliers(self) -> None:
        ok, suppliers = await self._call(self.api.list_suppliers(), "Failed to load suppliers")
        if ok:
            self.suppliers = suppliers

    async def load_item(self, item_id: int) -> None:
        ok, item = await self._call(self.api.get_inventory_item(item_id), "Failed to load item")
        if ok:
            self.form.patch_value(item.model_dump())
        elif not self.destroyed:
            self.navigator.navigate(LIST_PATH)

    async def submit(self) -> bool:
        """
        Validate and save the form.

        Returns:
            True if the item was saved and the view navigated back to the list
        """
        if not self.form.is_valid():
            self.notifier.open("Please fill all required fields correctly")
            return False

        payload = self.form.value()
        supplier_id = payload.pop("supplier_id")
        if self.is_edit_mode:
            request = self.api.update_inventory_item(self.item_id, payload, supplier_id=supplier_id)
        else:
            request = self.api.create_inventory_item(payload, supplier_id=supplier_id)

        ok, _ = await self._call(request, "Failed to save item")
        if not ok:
            return False
        self.notifier.open("Item updated successfully" if self.is_edit_mode else "Item created successfully")
        self.navigator.navigate(LIST_PATH)
        return True
