# Academy Search Utilities Package
"""
Shared utility functions and helpers for the academy search.
"""

from .debounce import Debouncer
from .helpers import load_locales, load_settings

__all__ = ["Debouncer", "load_locales", "load_settings"]
