"""
Shared test fixtures for the academy search test suite.

Provides an in-memory content dictionary plus locale and settings files
that use real file I/O (no mocking of the filesystem).
"""

import json
from unittest.mock import MagicMock

import pytest
import toml

from academy_search.search.engine import SearchEngine
from academy_search.search.index import SearchIndex
from academy_search.services.actions import SearchActions
from academy_search.services.navigation import NavigationBridge
from academy_search.services.session import SearchStore


CONTENT = {
    "ru": {
        "nav": {
            "bachelor": "Бакалавриат",
            "faculties": "Факультет спорта и туризма",
            "history": "История",
            "about_academy": "Об академии",
        },
        "bachelor": {
            "info": {
                "title": "Бакалавриат: общая информация",
                "programs": {
                    "cs": {
                        "subjects": ["Факультет спорта и туризма", 42, None, True, ""],
                    },
                },
            },
        },
        "students": {
            "info": {"title": "Стипендия"},
            "clubs": {"title": "Государственная стипендия"},
        },
        "museum": "Музей спорта",
        "count": 12,
    },
    "en": {
        "nav": {"bachelor": "Bachelor", "history": "History"},
        "students": {"info": {"title": "Scholarship"}},
    },
    "kg": {
        "nav": {"bachelor": "Бакалавриат"},
    },
}


@pytest.fixture
def content():
    return CONTENT


@pytest.fixture
def index(content):
    return SearchIndex(content)


@pytest.fixture
def engine(index):
    return SearchEngine(index)


@pytest.fixture
def navigate():
    return MagicMock()


@pytest.fixture
def session(engine, navigate):
    """Store, facade and bridge wired together like config.create_search_panel."""
    store = SearchStore(language="ru")
    bridge = NavigationBridge(navigate)
    actions = SearchActions(store, engine, bridge)
    return actions


@pytest.fixture
def tmp_locales(tmp_path, content):
    """Write the content dictionary as <lang>/translation.json files."""
    locales_dir = tmp_path / "locales"
    for language, tree in content.items():
        lang_dir = locales_dir / language
        lang_dir.mkdir(parents=True)
        (lang_dir / "translation.json").write_text(
            json.dumps(tree, ensure_ascii=False), encoding="utf-8"
        )
    return locales_dir


@pytest.fixture
def tmp_settings(tmp_path, tmp_locales):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "search": {"max_results": 10, "default_language": "en", "languages": ["ru", "en", "kg"]},
        "panel": {"debounce_ms": 10_000},
        "locales": {"path": str(tmp_locales)},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
