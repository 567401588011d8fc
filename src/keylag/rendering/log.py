# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import typing

from ..durations import format_ms

if typing.TYPE_CHECKING:
    from collections.abc import Sequence

    from ..editor.reconcile import CommittedKeystroke


def render_line(index: int, keystroke: CommittedKeystroke) -> str:
    delay = "-" if index == 0 else format_ms(keystroke.delay)
    return ", ".join(
        [
            str(index),
            keystroke.char,
            format_ms(keystroke.timestamp),
            format_ms(keystroke.baseline),
            delay,
        ]
    )


def render_log(committed_log: Sequence[CommittedKeystroke]) -> list[str]:
    return [render_line(index, keystroke) for index, keystroke in enumerate(committed_log)]
