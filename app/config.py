# app/config.py
from __future__ import annotations
import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from app.errors import ConfigError
from utils.file_handler import read_json

SETTINGS_ENV = "KEYRACE_SETTINGS"
DEFAULT_SETTINGS_FILE = Path("settings.json")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    first_round_words: int = 5
    next_round_words: int = 10
    theme: str = "Monkeytype Dark"
    words_file: str = "assets/texts/words.txt"
    seed: Optional[int] = None
    log_level: str = "INFO"

    def validate(self) -> None:
        for name in ("first_round_words", "next_round_words"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ConfigError(f"seed must be an integer or null, got {self.seed!r}")
        if not isinstance(self.theme, str) or not self.theme:
            raise ConfigError("theme must be a non-empty string")
        if not isinstance(self.words_file, str):
            raise ConfigError("words_file must be a string path")
        if str(self.log_level).upper() not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level!r}")
        self.log_level = str(self.log_level).upper()


def settings_from_dict(d: Dict[str, Any]) -> Settings:
    if not isinstance(d, dict):
        raise ConfigError("settings must be a JSON object")
    known = {f.name for f in fields(Settings)}
    unknown = set(d) - known
    if unknown:
        raise ConfigError(f"Unknown settings keys: {', '.join(sorted(unknown))}")
    settings = Settings(**d)
    settings.validate()
    return settings


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Settings from `path`, $KEYRACE_SETTINGS, or ./settings.json (first match).
    A missing file means defaults.
    """
    if path is None:
        path = Path(os.environ.get(SETTINGS_ENV, DEFAULT_SETTINGS_FILE))
    try:
        data = read_json(Path(path))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e
    if data is None:
        logging.getLogger(__name__).info("No settings file at %s, using defaults", path)
        return Settings()
    return settings_from_dict(data)
