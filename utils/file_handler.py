# utils/file_handler.py
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

log = logging.getLogger(__name__)


def read_json(path: Path) -> Optional[Any]:
    """Parsed JSON from `path`, or None when the file does not exist."""
    if not path.exists():
        return None
    return json.loads(path.read_text(encoding="utf-8"))


def load_words(path: Path) -> Optional[List[str]]:
    """Whitespace-separated words from a text file; None when the file is missing."""
    if not path.exists():
        log.warning("Word list %s not found, using built-in words", path)
        return None
    text = path.read_text(encoding="utf-8").replace("\r\n", "\n")
    return text.split()
