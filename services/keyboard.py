# services/keyboard.py
from PySide6.QtCore import Qt

from core.keys import KeyEvent

_IGNORED_MODIFIERS = Qt.ControlModifier | Qt.AltModifier | Qt.MetaModifier


def normalize_key(key, text: str, modifiers=Qt.NoModifier) -> KeyEvent:
    """Classify a Qt key press into one of the game's key kinds."""
    if key == Qt.Key_Escape:
        return KeyEvent.escape()
    if modifiers & _IGNORED_MODIFIERS:
        return KeyEvent.other()
    if key == Qt.Key_Backspace:
        return KeyEvent.backspace()
    if key in (Qt.Key_Return, Qt.Key_Enter):
        return KeyEvent.enter()
    # single printable chars only; composed/multi-char text is not modelled
    if text and len(text) == 1 and text.isprintable():
        return KeyEvent.of(text)
    return KeyEvent.other()


def event_from_qt(ev) -> KeyEvent:
    return normalize_key(ev.key(), ev.text(), ev.modifiers())
