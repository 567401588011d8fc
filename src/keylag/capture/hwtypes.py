from __future__ import annotations

import enum
import typing

import msgspec


class KeyClass(enum.Enum):
    CHARACTER = enum.auto()
    DELETION = enum.auto()
    IGNORED = enum.auto()


class KeyEvent(msgspec.Struct, frozen=True, kw_only=True):
    key: str
    timestamp: float


class KeyPressed(msgspec.Struct, frozen=True, kw_only=True, tag=True):
    key: str
    timestamp: float

    def as_key_event(self):
        return KeyEvent(key=self.key, timestamp=self.timestamp)


class TextChanged(msgspec.Struct, frozen=True, kw_only=True, tag=True):
    text: str


class Reset(msgspec.Struct, frozen=True, kw_only=True, tag=True):
    pass


class DeletionSignal(msgspec.Struct, frozen=True, kw_only=True, tag=True):
    key: str
    timestamp: float


Notification = typing.Union[KeyPressed, TextChanged, Reset]
ClassifiedNotification = typing.Union[KeyPressed, DeletionSignal, TextChanged, Reset]
