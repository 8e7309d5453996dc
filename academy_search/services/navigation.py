"""
Navigation Bridge - Hands a selected result's route to the host application.

The bridge never navigates by itself. It calls the host's `navigate(route)`
callback and then notifies close listeners so the search overlay can hide.
"""

from typing import Callable

from loguru import logger


class NavigationBridge:
    """
    Route selected results to the host router.

    Args:
        navigate: Host callback taking a route path (e.g. "/academy/about")
    """

    def __init__(self, navigate: Callable[[str], None]):
        self.navigate = navigate
        self._close_listeners: list[Callable[[], None]] = []

    def on_close(self, listener: Callable[[], None]) -> None:
        """Register a callback run after each navigation."""
        self._close_listeners.append(listener)

    def navigate_to_result(self, result) -> bool:
        """
        Navigate to a result's route and request the search UI to close.

        Args:
            result: Anything with a `route` attribute (IndexEntry, ScoredResult)

        Returns:
            True if a route was emitted, False if the result has none
        """
        route = getattr(result, "route", None)
        if not route:
            logger.debug(f"Result {getattr(result, 'id', result)!r} has no route")
            return False

        logger.debug(f"Navigating to {route}")
        self.navigate(route)

        for listener in list(self._close_listeners):
            listener()
        return True
