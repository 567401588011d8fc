# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import functools
import logging
import typing

import msgspec

from ..capture.hwtypes import KeyEvent, KeyPressed, Reset, TextChanged
from .queue import EventQueue

if typing.TYPE_CHECKING:
    from ..capture.hwtypes import Notification


logger = logging.getLogger(__name__)

# Text-change notifications are not tied to key events. One text change can stand for no key
# events (paste), one key event, or several queued ones (autocomplete, IME commit). A selection
# replaced by a single keystroke shrinks and grows the buffer within one notification. All we get
# to look at is the difference in length, so that's what decides how the queue is spent.


class CommittedKeystroke(msgspec.Struct, frozen=True, kw_only=True):
    char: str
    timestamp: float
    baseline: float

    @property
    def delay(self):
        return self.timestamp - self.baseline


class State(msgspec.Struct, frozen=True, kw_only=True):
    committed_log: tuple[CommittedKeystroke, ...] = ()
    pending_queue: EventQueue = msgspec.field(default_factory=EventQueue)
    last_commit_time: typing.Optional[float] = None
    text: str = ""

    @classmethod
    def initial(cls):
        return cls()


def _commit_batch(
    accum: tuple[tuple[CommittedKeystroke, ...], typing.Optional[float]],
    event: KeyEvent,
):
    committed, baseline = accum
    if baseline is None:
        # the very first keystroke ever recorded has nothing to be late relative to
        baseline = event.timestamp
    keystroke = CommittedKeystroke(char=event.key, timestamp=event.timestamp, baseline=baseline)
    return committed + (keystroke,), event.timestamp


def _truncate(log: tuple[CommittedKeystroke, ...], count: int):
    if count <= 0:
        return log
    return log[: max(len(log) - count, 0)]


def reconcile(state: State, new_text: str) -> State:
    old_len = len(state.text)
    new_len = len(new_text)
    delta = new_len - old_len
    queue = state.pending_queue

    # A pending event with no growth is a replace, never an ignored keystroke.
    if queue:
        if delta > 0:
            consumed = queue.take(delta)
            committed, last_commit_time = functools.reduce(
                _commit_batch, consumed, (state.committed_log, state.last_commit_time)
            )
            logger.debug("Committed %d of %d new characters from the queue", len(consumed), delta)
            return msgspec.structs.replace(
                state,
                committed_log=committed,
                pending_queue=queue.drop(len(consumed)),
                last_commit_time=last_commit_time,
                text=new_text,
            )

        (event,) = queue.take(1)
        if new_len == 0:
            # nothing survived, so the keystroke cannot be in the buffer
            logger.debug("Buffer cleared with %r pending; discarding it", event.key)
            return msgspec.structs.replace(state, committed_log=(), pending_queue=queue.drop(1), text=new_text)
        keystroke = CommittedKeystroke(char=event.key, timestamp=event.timestamp, baseline=event.timestamp)
        removed = old_len - new_len + 1
        logger.debug("Replaced %d characters with %r", removed, event.key)
        return msgspec.structs.replace(
            state,
            committed_log=_truncate(state.committed_log, removed) + (keystroke,),
            pending_queue=queue.drop(1),
            last_commit_time=event.timestamp,
            text=new_text,
        )

    if delta > 0:
        logger.debug("%d characters arrived with no key events; leaving them unmeasured", delta)
        return msgspec.structs.replace(state, text=new_text)

    return msgspec.structs.replace(
        state,
        committed_log=_truncate(state.committed_log, -delta),
        text=new_text,
    )


def transition(state: State, notification: Notification) -> State:
    match notification:
        case KeyPressed():
            return msgspec.structs.replace(state, pending_queue=state.pending_queue.push(notification.as_key_event()))
        case TextChanged(text=new_text):
            return reconcile(state, new_text)
        case Reset():
            return State.initial()
    raise TypeError(f"Unexpected notification {notification!r}")
