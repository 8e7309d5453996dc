# Academy Search Panels Package
"""
UI-side controllers for the search overlay.

Each panel is responsible for its own input and presentation logic.
"""

from .search import SearchPanel

__all__ = ["SearchPanel"]
