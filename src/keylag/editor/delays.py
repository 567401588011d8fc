# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Read-only timing statistics over a committed keystroke log."""
from __future__ import annotations

import statistics
import typing

import msgspec

if typing.TYPE_CHECKING:
    from collections.abc import Sequence

    from .reconcile import CommittedKeystroke


class DelaySummary(msgspec.Struct, frozen=True, kw_only=True):
    count: int
    mean: float
    median: float
    fastest: float
    slowest: float


def delays(committed_log: Sequence[CommittedKeystroke]) -> list[float]:
    # the first keystroke is its own baseline, so it never contributes a delay
    return [keystroke.timestamp - keystroke.baseline for keystroke in committed_log[1:]]


def average(committed_log: Sequence[CommittedKeystroke]) -> typing.Optional[float]:
    measured = delays(committed_log)
    if not measured:
        return None
    return statistics.fmean(measured)


def summarize(committed_log: Sequence[CommittedKeystroke]) -> typing.Optional[DelaySummary]:
    measured = delays(committed_log)
    if not measured:
        return None
    return DelaySummary(
        count=len(measured),
        mean=statistics.fmean(measured),
        median=statistics.median(measured),
        fastest=min(measured),
        slowest=max(measured),
    )
