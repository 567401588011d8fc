# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc

from .hwtypes import KeyClass

# Key names follow the DOM KeyboardEvent.key vocabulary. Anything in here never reaches the
# pending queue, because it cannot put a character into the buffer on its own.
EXCLUDED_KEYS = frozenset(
    {
        "ArrowUp",
        "ArrowDown",
        "ArrowLeft",
        "ArrowRight",
        "Home",
        "End",
        "PageUp",
        "PageDown",
        "Shift",
        "Control",
        "Alt",
        "AltGraph",
        "Meta",
        "OS",
        "CapsLock",
        "NumLock",
        "ScrollLock",
        "Escape",
        "F1",
        "F2",
        "F3",
        "F4",
        "F5",
        "F6",
        "F7",
        "F8",
        "F9",
        "F10",
        "F11",
        "F12",
        "Insert",
        "Pause",
        "PrintScreen",
        "ContextMenu",
    }
)

DELETION_KEYS = frozenset({"Backspace", "Delete"})

# stored as literal escapes so each log line stays on one line
KEY_SUBSTITUTIONS = {
    "Enter": "\\n",
    "Tab": "\\t",
}


class KeyClassifier:
    def __init__(
        self,
        excluded: collections.abc.Iterable[str] = EXCLUDED_KEYS,
        deletion: collections.abc.Iterable[str] = DELETION_KEYS,
        substitutions: collections.abc.Mapping[str, str] = KEY_SUBSTITUTIONS,
    ):
        self.excluded = frozenset(excluded)
        self.deletion = frozenset(deletion)
        self.substitutions = dict(substitutions)

    @classmethod
    def from_settings(cls, settings):
        return cls(
            excluded=settings.excluded_keys,
            deletion=settings.deletion_keys,
            substitutions=settings.key_substitutions,
        )

    def classify(self, key: str) -> KeyClass:
        if key in self.deletion:
            return KeyClass.DELETION
        if key in self.excluded:
            return KeyClass.IGNORED
        return KeyClass.CHARACTER

    def normalize(self, key: str) -> str:
        return self.substitutions.get(key, key)
