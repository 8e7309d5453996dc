"""
Search categories offered as filters, with labels per language.
"""

SEARCH_CATEGORIES = [
    {"value": "all", "label": {"ru": "Все", "en": "All", "kg": "Баары"}},
    {"value": "home", "label": {"ru": "Главная", "en": "Home", "kg": "Башкы"}},
    {"value": "academy", "label": {"ru": "Академия", "en": "Academy", "kg": "Академия"}},
    {"value": "admissions", "label": {"ru": "Поступление", "en": "Admissions", "kg": "Кабыл алуу"}},
    {"value": "education", "label": {"ru": "Образование", "en": "Education", "kg": "Билим берүү"}},
    {"value": "science", "label": {"ru": "Наука", "en": "Science", "kg": "Илим"}},
    {"value": "students", "label": {"ru": "Студентам", "en": "Students", "kg": "Студенттер үчүн"}},
    {"value": "contacts", "label": {"ru": "Контакты", "en": "Contacts", "kg": "Байланыш"}},
]


def get_search_categories() -> list[dict]:
    """Return a copy of the category filter list."""
    return [
        {"value": c["value"], "label": dict(c["label"])}
        for c in SEARCH_CATEGORIES
    ]


def category_label(category: str, language: str) -> str:
    """Localized category name; falls back to Russian, then the raw value."""
    for c in SEARCH_CATEGORIES:
        if c["value"] == category:
            return c["label"].get(language) or c["label"]["ru"]
    return category
