"""
Category and stock-level filter controls for the inventory table.
"""
from typing import Awaitable, Callable, Dict, List, Optional

FilterListener = Callable[[Dict[str, Optional[str]]], Awaitable[None]]


class InventoryFiltersView:
    """Holds the current filter values and notifies listeners when one changes."""

    def __init__(self):
        self.category: Optional[str] = None
        self.stock: Optional[str] = None
        self._listeners: List[FilterListener] = []

    def subscribe(self, listener: FilterListener) -> None:
        self._listeners.append(listener)

    @property
    def filters(self) -> Dict[str, Optional[str]]:
        return {"category": self.category, "stock": self.stock}

    async def on_category_change(self, value: Optional[str]) -> None:
        self.category = (value.strip() or None) if value else None
        await self._emit()

    async def on_stock_change(self, value: Optional[str]) -> None:
        self.stock = value or None
        await self._emit()

    async def _emit(self) -> None:
        for listener in self._listeners:
            await listener(self.filters)
