"""
Navigation state shared by the views.
"""
import logging
from typing import Dict, List

logger = logging.getLogger(__name__)


class Navigator:
    """
    Tracks the current route and its parameters.

    Args:
        path: Initial path
        params: Route parameters, e.g. {"id": "3"} for /inventory/edit/3
    """

    def __init__(self, path: str = "/", params: Dict[str, str] = None):
        self.path = path
        self.params = dict(params or {})
        self.history: List[str] = [path]

    def navigate(self, path: str, params: Dict[str, str] = None) -> None:
        logger.debug(f"Navigating to {path}")
        self.path = path
        self.params = dict(params or {})
        self.history.append(path)
