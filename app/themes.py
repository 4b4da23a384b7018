# app/themes.py
from __future__ import annotations
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List

from app.errors import ConfigError
from utils.file_handler import read_json

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    name: str
    background: str
    primary: str
    secondary: str
    accent: str
    correct: str = "#22c55e"
    error: str = "#ef4444"
    muted: str = "#6b7280"


# -------- Built-in themes --------
BUILTIN_THEMES: List[Theme] = [
    Theme(
        name="Monkeytype Dark",
        background="#0f1115",
        primary="#e5e7eb",
        secondary="#6b7280",
        accent="#eab308",
    ),
    Theme(
        name="Monkeytype Light",
        background="#fafafa",
        primary="#111111",
        secondary="#6b6b6b",
        accent="#eab308",
        correct="#15803d",
        error="#b91c1c",
        muted="#9ca3af",
    ),
    Theme(
        name="Nord",
        background="#2e3440",
        primary="#eceff4",
        secondary="#88c0d0",
        accent="#bf616a",
        correct="#a3be8c",
        error="#bf616a",
        muted="#4c566a",
    ),
]

THEMES: List[Theme] = list(BUILTIN_THEMES)
CUSTOM_THEMES_FILE = Path("themes.json")


def theme_from_dict(d: Dict[str, Any]) -> Theme:
    required = {"name", "background", "primary", "secondary", "accent"}
    if not isinstance(d, dict):
        raise ConfigError("theme entry must be an object")
    missing = required - set(d.keys())
    if missing:
        raise ConfigError(f"Missing theme keys: {', '.join(sorted(missing))}")
    allowed = {f.name for f in fields(Theme)}
    return Theme(**{k: str(v) for k, v in d.items() if k in allowed})


def load_custom_themes(path: Path = CUSTOM_THEMES_FILE) -> int:
    """Append themes from `path` (if present). Returns how many were added."""
    try:
        data = read_json(path)
    except ValueError as e:
        log.warning("Ignoring %s: %s", path, e)
        return 0
    if data is None:
        return 0
    if not isinstance(data, list):
        log.warning("Ignoring %s: expected a list of themes", path)
        return 0
    added = 0
    for item in data:
        try:
            theme = theme_from_dict(item)
        except ConfigError as e:
            log.warning("Skipping theme in %s: %s", path, e)
            continue
        THEMES.append(theme)
        added += 1
    return added


def find_theme(name: str) -> Theme:
    for theme in THEMES:
        if theme.name == name:
            return theme
    log.warning("Unknown theme %r, falling back to %s", name, THEMES[0].name)
    return THEMES[0]
