# Academy Search Package
"""
Client-side search for the multilingual academy website.

Layers:
  - search: Locale index, route resolution, ranked search
  - services: Session state, action facade, navigation bridge
  - panels: Headless search overlay controller
"""

__version__ = "0.1.0-dev"
