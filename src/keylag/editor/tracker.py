# SPDX-FileCopyrightText: 2023 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import typing

import trio_util

from ..capture.hwtypes import DeletionSignal, KeyClass, KeyPressed, Reset, TextChanged
from ..capture.keyclass import KeyClassifier
from ..rendering.log import render_log
from . import delays as timing
from .reconcile import State, reconcile, transition

if typing.TYPE_CHECKING:
    from ..capture.hwtypes import ClassifiedNotification
    from ..settings import Settings


logger = logging.getLogger(__name__)


# The tracker is the only writer of the state. Every notification is handled to completion and
# the state is swapped out wholesale, so whoever is watching `state` never sees half a transition.
class DelayTracker:
    state: trio_util.AsyncValue[State]
    last_deletion_time: typing.Optional[float]

    def __init__(self, settings: Settings):
        self.classifier = KeyClassifier.from_settings(settings)
        self.state = trio_util.AsyncValue(State.initial())
        self.last_deletion_time = None

    @property
    def current(self) -> State:
        return self.state.value

    @property
    def text(self):
        return self.current.text

    @property
    def committed_log(self):
        return self.current.committed_log

    @property
    def keystroke_count(self):
        return len(self.current.committed_log)

    @property
    def average_delay(self):
        return timing.average(self.current.committed_log)

    @property
    def delays(self):
        return timing.delays(self.current.committed_log)

    @property
    def summary(self):
        return timing.summarize(self.current.committed_log)

    def render_lines(self):
        return render_log(self.current.committed_log)

    def key_pressed(self, key: str, timestamp: float):
        match self.classifier.classify(key):
            case KeyClass.IGNORED:
                logger.debug("Ignoring non-printing key %r", key)
            case KeyClass.DELETION:
                self.deletion(key, timestamp)
            case KeyClass.CHARACTER:
                event = KeyPressed(key=self.classifier.normalize(key), timestamp=timestamp)
                self.state.value = transition(self.current, event)

    def deletion(self, key: str, timestamp: float):
        logger.debug("%s pressed at %s", key, timestamp)
        self.last_deletion_time = timestamp

    def text_changed(self, new_text: str):
        self.state.value = reconcile(self.current, new_text)

    def reset(self):
        logger.debug("Resetting tracker")
        self.last_deletion_time = None
        self.state.value = State.initial()

    def handle(self, notification: ClassifiedNotification):
        match notification:
            case KeyPressed(key=key, timestamp=timestamp):
                self.key_pressed(key, timestamp)
            case DeletionSignal(key=key, timestamp=timestamp):
                self.deletion(key, timestamp)
            case TextChanged(text=new_text):
                self.text_changed(new_text)
            case Reset():
                self.reset()
            case _:
                raise TypeError(f"Unexpected notification {notification!r}")
