# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing

import msgspec

from .capture.hwtypes import KeyPressed, Reset, TextChanged
from .commontypes import ScriptError

if typing.TYPE_CHECKING:
    import collections.abc
    import pathlib

    from .editor.tracker import DelayTracker


logger = logging.getLogger(__name__)

# A script is a JSON array of tagged notifications, e.g.
# [{"type": "KeyPressed", "key": "a", "timestamp": 100.0}, {"type": "TextChanged", "text": "a"}]
Script = list[typing.Union[KeyPressed, TextChanged, Reset]]

_encoder = msgspec.json.Encoder()
_decoder = msgspec.json.Decoder(Script)


class Recorder:
    def __init__(self, wrapped: DelayTracker):
        self.wrapped = wrapped
        self.notifications: Script = []

    def key_pressed(self, key: str, timestamp: float):
        self.notifications.append(KeyPressed(key=key, timestamp=timestamp))
        self.wrapped.key_pressed(key, timestamp)

    def text_changed(self, new_text: str):
        self.notifications.append(TextChanged(text=new_text))
        self.wrapped.text_changed(new_text)

    def reset(self):
        self.notifications.append(Reset())
        self.wrapped.reset()

    def save_script(self, path: pathlib.Path):
        path.write_bytes(_encoder.encode(self.notifications))


def decode_script(raw: bytes) -> Script:
    try:
        return _decoder.decode(raw)
    except msgspec.DecodeError as e:
        raise ScriptError(f"Invalid notification script: {e}") from e


def load_script(path: pathlib.Path) -> Script:
    return decode_script(path.read_bytes())


def replay(script: collections.abc.Iterable[KeyPressed | TextChanged | Reset], tracker: DelayTracker):
    count = 0
    for notification in script:
        tracker.handle(notification)
        count += 1
    logger.debug("Replayed %d notifications", count)
    return tracker
