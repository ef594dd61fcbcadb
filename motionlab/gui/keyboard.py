"""
Keyboard polling state

Qt delivers key events; modes poll is_key_down() once per tick. Keys are
tracked by the physical scan code: Qt reports Shift+= as Key_Plus on press
but Key_Equal on release if Shift went up first, so neither the produced
character nor the Qt key code identifies the key across modifier changes.
"""

from typing import Dict, Optional

from PyQt6.QtCore import Qt

from ..modes.base import KeySnapshot
from ..utils.constants import KEY_BACKSPACE, KEY_DELETE

SPECIAL_KEYS = {
    Qt.Key.Key_Backspace: KEY_BACKSPACE,
    Qt.Key.Key_Delete: KEY_DELETE,
}


def key_code_for(event) -> int:
    """
    Identity of the physical key behind a Qt key event

    Uses the native scan code, falling back to the Qt key code on platforms
    that report 0.
    """
    return event.nativeScanCode() or int(event.key())


def key_id_for(key, text: str) -> Optional[str]:
    """
    Map a Qt key event to a key id

    Args:
        key: Qt.Key value (or its int code)
        text: text produced by the event

    Returns:
        "BACKSPACE"/"DELETE", the produced character, or None
    """
    for qt_key, key_id in SPECIAL_KEYS.items():
        if key == qt_key or key == qt_key.value:
            return key_id
    if len(text) == 1 and text.isprintable():
        return text
    return None


class KeyboardState:
    """Set of keys currently held down"""

    def __init__(self):
        self._held: Dict[int, str] = {}

    def press(self, key_code: int, key_id: Optional[str]):
        if key_id is not None:
            self._held[key_code] = key_id

    def release(self, key_code: int):
        self._held.pop(key_code, None)

    def clear(self):
        self._held.clear()

    def is_key_down(self, key_id: str) -> bool:
        return key_id in self._held.values()

    def snapshot(self) -> KeySnapshot:
        return KeySnapshot(self._held.values())
