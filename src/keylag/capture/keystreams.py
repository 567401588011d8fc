# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import abc
import logging
from contextlib import aclosing, asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterable, cast

import trio

from .hwtypes import DeletionSignal, KeyClass, KeyPressed
from .keyclass import KeyClassifier

if TYPE_CHECKING:
    from ..editor.tracker import DelayTracker
    from ..settings import Settings
    from .hwtypes import ClassifiedNotification, Notification


logger = logging.getLogger(__name__)


class Section(abc.ABC):
    @abc.abstractmethod
    async def pump(self, source: trio.MemoryReceiveChannel[Any], sink: trio.MemorySendChannel[Any]): ...


# stage 1: drop navigation and modifier keys, route deletion keys aside, normalize the rest
class ClassifyKeys(Section):
    def __init__(self, classifier: KeyClassifier):
        self.classifier = classifier

    async def pump(self, source: trio.MemoryReceiveChannel[Notification], sink: trio.MemorySendChannel[ClassifiedNotification]):
        async with aclosing(source), aclosing(sink):
            async for notification in source:
                if not isinstance(notification, KeyPressed):
                    await sink.send(notification)
                    continue
                match self.classifier.classify(notification.key):
                    case KeyClass.IGNORED:
                        logger.debug("Dropping %r", notification.key)
                    case KeyClass.DELETION:
                        await sink.send(DeletionSignal(key=notification.key, timestamp=notification.timestamp))
                    case KeyClass.CHARACTER:
                        await sink.send(KeyPressed(key=self.classifier.normalize(notification.key), timestamp=notification.timestamp))


@asynccontextmanager
async def pump_all(first_source: AsyncIterable[Any], *sections: Section):
    async with trio.open_nursery() as nursery:
        section_input = first_source
        for section in sections:
            section_send_channel, section_receive_channel = trio.open_memory_channel(0)
            nursery.start_soon(section.pump, section_input, section_send_channel)
            section_input = section_receive_channel
        yield section_input
        nursery.cancel_scope.cancel()


@asynccontextmanager
async def make_notification_stream(
    notification_channel: trio.MemoryReceiveChannel[Notification],
    settings: Settings,
):
    sections = [
        ClassifyKeys(KeyClassifier.from_settings(settings)),
    ]

    async with pump_all(notification_channel, *sections) as stream:
        yield cast(trio.MemoryReceiveChannel["ClassifiedNotification"], stream)


async def drive_tracker(stream: AsyncIterable[ClassifiedNotification], tracker: DelayTracker):
    # one notification at a time, each one finished before the next is read
    async for notification in stream:
        tracker.handle(notification)
