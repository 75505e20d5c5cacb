"""
Shared lifecycle for list and form views.
"""
import inspect
import logging
from typing import Any, Awaitable, Callable, Tuple

from ..clients.api_client import ApiError, InventoryApiClient
from ..navigation import Navigator
from ..notifications import Notifier

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


class View:
    """
    Base class for views.

    A view is initialised with ``await view.init()`` and torn down with
    ``view.destroy()``. Once destroyed, results of requests still in flight are
    dropped and no notifications are raised for them.
    """

    def __init__(self, api: InventoryApiClient, notifier: Notifier, navigator: Navigator):
        self.api = api
        self.notifier = notifier
        self.navigator = navigator
        self.destroyed = False

    async def init(self) -> None:
        pass

    def destroy(self) -> None:
        self.destroyed = True

    async def _call(self, awaitable: Awaitable[Any], error_message: str) -> Tuple[bool, Any]:
        """
        Await an API call and report failures as a notification.

        Returns:
            Tuple of (success, result). Success is False when the call failed
            or the view was destroyed in the meantime.
        """
        if self.destroyed:
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            return False, None
        try:
            result = await awaitable
        except ApiError as e:
            logger.error(f"{error_message}: {e.message}")
            if not self.destroyed:
                self.notifier.open(error_message)
            return False, None
        if self.destroyed:
            return False, None
        return True, result
