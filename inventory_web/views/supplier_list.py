"""
Supplier table view.
"""
from typing import List

from ..models import Supplier
from .base import Confirm, View

LIST_PATH = "/suppliers"


class SupplierListView(View):
    """Lists suppliers and offers edit and delete."""

    displayed_columns = ["id", "name", "email", "phone", "contact", "actions"]

    def __init__(self, api, notifier, navigator, confirm: Confirm):
        super().__init__(api, notifier, navigator)
        self.confirm = confirm
        self.suppliers: List[Supplier] = []

    async def init(self) -> None:
        await self.load_suppliers()

    async def load_suppliers(self) -> None:
        ok, suppliers = await self._call(self.api.list_suppliers(), "Failed to load suppliers")
        if not ok:
            return
        self.suppliers = suppliers
        if not self.suppliers:
            self.notifier.open("No suppliers available")

    async def delete_supplier(self, supplier_id: int) -> bool:
        if not self.confirm("Are you sure you want to delete this supplier?"):
            return False
        ok, _ = await self._call(self.api.delete_supplier(supplier_id), "Failed to delete supplier")
        if not ok:
            return False
        self.notifier.open("Supplier deleted")
        await self.load_suppliers()
        return True

    def edit_supplier(self, supplier_id: int) -> None:
        self.navigator.navigate(f"{LIST_PATH}/edit/{supplier_id}", {"id": str(supplier_id)})
