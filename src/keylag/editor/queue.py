# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import typing

import msgspec

from ..capture.hwtypes import KeyEvent


class EventQueue(msgspec.Struct, frozen=True):
    """Captured key events which have not yet been matched to a text change.

    The queue is a value: push and drop hand back a new queue and leave this one alone.
    """

    events: tuple[KeyEvent, ...] = ()

    def push(self, event: KeyEvent) -> EventQueue:
        return EventQueue(events=self.events + (event,))

    def take(self, n: int) -> tuple[KeyEvent, ...]:
        if n <= 0:
            return ()
        return self.events[:n]

    def drop(self, n: int) -> EventQueue:
        if n <= 0:
            return self
        return EventQueue(events=self.events[n:])

    def __len__(self):
        return len(self.events)

    def __bool__(self):
        return bool(self.events)

    def __iter__(self) -> typing.Iterator[KeyEvent]:
        return iter(self.events)
