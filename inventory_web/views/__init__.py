from .inventory_filters import InventoryFiltersView
from .inventory_form import InventoryFormView
from .inventory_list import InventoryListView
from .supplier_form import SupplierFormView
from .supplier_list import SupplierListView

__all__ = [
    "InventoryFiltersView",
    "InventoryFormView",
    "InventoryListView",
    "SupplierFormView",
    "SupplierListView",
]
