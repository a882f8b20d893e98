"""Persistent JSON config helpers.

Stores the document extension, default search flags, and highlight style.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "notefind"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_DOCUMENT_EXTENSION = "md"
DEFAULT_STYLE = "monokai"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_bool(key: str) -> bool:
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def _save_value(key: str, value: object) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def load_document_extension() -> str:
    """Return the configured document extension without a leading dot.

    Non-string, empty, or dot-only values fall back to ``"md"``.
    """
    value = load_config().get("document_extension")
    if not isinstance(value, str):
        return DEFAULT_DOCUMENT_EXTENSION
    value = value.strip().lstrip(".")
    return value or DEFAULT_DOCUMENT_EXTENSION


def save_document_extension(extension: str) -> None:
    _save_value("document_extension", extension.strip().lstrip("."))


def load_case_sensitive() -> bool:
    return _load_bool("case_sensitive")


def save_case_sensitive(case_sensitive: bool) -> None:
    _save_value("case_sensitive", bool(case_sensitive))


def load_use_regex() -> bool:
    return _load_bool("use_regex")


def save_use_regex(use_regex: bool) -> None:
    _save_value("use_regex", bool(use_regex))


def load_style() -> str:
    value = load_config().get("style")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return DEFAULT_STYLE


def save_style(style: str) -> None:
    _save_value("style", style)
