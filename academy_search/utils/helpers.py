"""
Helper utilities for the academy search.

Provides common functions used across packages:
- Settings loading
- Locale dictionary loading
"""

import json
from pathlib import Path
from typing import Any, Dict

import toml
from loguru import logger

DATA_DIR = Path(__file__).parent.parent / "data"


def load_settings(settings_path: Path | None = None) -> Dict[str, Any]:
    """
    Load search settings from TOML file.

    Args:
        settings_path: File to read; defaults to data/settings.toml

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "search": {
                "max_results": 25,
                "default_language": "ru",
                "languages": ["ru", "en", "kg"]
            },
            "panel": {
                "debounce_ms": 300
            },
            "locales": {
                "path": "locales"
            }
        }
    """
    defaults = {
        "search": {
            "max_results": 25,
            "default_language": "ru",
            "languages": ["ru", "en", "kg"],
        },
        "panel": {
            "debounce_ms": 300,
        },
        "locales": {
            "path": "locales",
        },
    }

    if settings_path is None:
        settings_path = DATA_DIR / "settings.toml"

    if not settings_path.exists():
        logger.info(f"Settings file not found at {settings_path}, using defaults")
        return defaults

    try:
        loaded = toml.load(settings_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {settings_path}: {e}")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_locales(locales_path, languages) -> Dict[str, Any]:
    """
    Load translation trees from <locales_path>/<lang>/translation.json.

    Args:
        locales_path: Directory of locale folders; relative paths resolve
                      against the package data directory
        languages: Language codes to load

    Returns:
        Mapping of language code → translation tree. Languages whose file
        is missing or invalid map to an empty dict.
    """
    base = Path(locales_path)
    if not base.is_absolute():
        base = DATA_DIR / base

    locales = {}
    for language in languages:
        path = base / language / "translation.json"
        if not path.exists():
            logger.warning(f"Locale file not found: {path}")
            locales[language] = {}
            continue

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load locale {language} from {path}: {e}")
            locales[language] = {}
            continue

        if not isinstance(data, dict):
            logger.warning(f"Locale {language} at {path} is not an object, ignoring")
            data = {}
        locales[language] = data

    return locales
