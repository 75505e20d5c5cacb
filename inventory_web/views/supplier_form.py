"""
Create/edit form for suppliers.
"""
from typing import Optional

from ..forms import Form, text_field
from .base import View
from .supplier_list import LIST_PATH


class SupplierFormView(View):
    """Supplier form. Edits the supplier named by the ``id`` route parameter, otherwise creates one."""

    def __init__(self, api, notifier, navigator):
        super().__init__(api, notifier, navigator)
        self.form = Form(
            name=text_field(required=True),
            email=text_field(),
            phone=text_field(),
            contact=text_field(),
        )
        self.is_edit_mode = False
        self.supplier_id: Optional[int] = None

    async def init(self) -> None:
        supplier_id = self.navigator.params.get("id")
        if supplier_id:
            self.is_edit_mode = True
            self.supplier_id = int(supplier_id)
            await self.load_supplier(self.supplier_id)

    async def load_supplier(self, supplier_id: int) -> None:
        ok, supplier = await self._call(self.api.get_supplier(supplier_id), "Failed to load supplier")
        if ok:
            self.form.patch_value(supplier.model_dump())
        elif not self.destroyed:
            self.navigator.navigate(LIST_PATH)

    async def submit(self) -> bool:
        if not self.form.is_valid():
            self.notifier.open("Please fill all required fields correctly")
            return False

        payload = self.form.value()
        if self.is_edit_mode:
            request = self.api.update_supplier(self.supplier_id, payload)
        else:
            request = self.api.create_supplier(payload)

        ok, _ = await self._call(request, "Failed to save supplier")
        if not ok:
            return False
        self.notifier.open("Supplier updated successfully" if self.is_edit_mode else "Supplier created successfully")
        self.navigator.navigate(LIST_PATH)
        return True
