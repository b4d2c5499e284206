"""Host message catalog.

Language packs are stored in the nested mapping MSG under their dotted,
lowercase code, so the Brazilian Portuguese pack "pt-BR" lives at
``MSG["pt"]["br"]``. A pack is only present once it has been installed.
"""

from typing import Any, Optional


STRINGS: dict[str, dict[str, str]] = {
    "en": {"TODAY": "Today", "NONE": "None", "DATE_PROMPT": "Pick a date"},
    "de": {"TODAY": "Heute", "NONE": "Keins", "DATE_PROMPT": "Datum wählen"},
    "es": {"TODAY": "Hoy", "NONE": "Ninguna", "DATE_PROMPT": "Elige una fecha"},
    "fr": {
        "TODAY": "Aujourd'hui",
        "NONE": "Aucune",
        "DATE_PROMPT": "Choisir une date",
    },
    "he": {"TODAY": "היום", "NONE": "ללא", "DATE_PROMPT": "בחר תאריך"},
    "pt.br": {"TODAY": "Hoje", "NONE": "Nenhuma", "DATE_PROMPT": "Escolha uma data"},
}
"""Built-in string tables, keyed by normalized language code."""

MSG: dict[str, Any] = {}
current_language: str = "en"


def normalize_language(code: str) -> str:
    """Convert codes like 'pt-BR' or 'pt_BR' to the catalog key 'pt.br'."""
    return code.strip().lower().replace("-", ".").replace("_", ".")


def get_object_by_name(name: str, root: Optional[dict[str, Any]] = None) -> Any:
    """Look up a dotted name in a nested mapping, returning None if missing."""
    node: Any = MSG if root is None else root
    for part in name.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


def install_language(code: str, strings: Optional[dict[str, str]] = None) -> str:
    """Add a language pack to MSG and make it current.

    Uses the built-in strings for code when none are given. Returns the
    normalized language key.
    """
    global current_language
    key = normalize_language(code)
    if strings is None:
        strings = STRINGS.get(key, STRINGS["en"])
    node = MSG
    parts = key.split(".")
    for part in parts[:-1]:
        node = node.setdefault(part, {})
    existing = node.get(parts[-1])
    if isinstance(existing, dict):
        existing.update(strings)
    else:
        node[parts[-1]] = dict(strings)
    current_language = key
    return key


def text(name: str) -> str:
    """Translated string for name in the current language."""
    pack = get_object_by_name(current_language)
    if isinstance(pack, dict) and isinstance(pack.get(name), str):
        return pack[name]
    return STRINGS["en"].get(name, name)


def reset() -> None:
    """Remove all installed language packs."""
    global current_language
    MSG.clear()
    current_language = "en"
