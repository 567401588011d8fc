import pytest

from keylag.durations import format_delay, format_ms
from keylag.editor.reconcile import CommittedKeystroke
from keylag.rendering.log import render_line, render_log


@pytest.mark.parametrize(
    "val,expected",
    (
        (0, "0"),
        (0.0, "0"),
        (50.0, "50"),
        (12.5, "12.5"),
        (1234.5678, "1234.568"),
        (-30.0, "-30"),
    ),
)
def test_format_ms(val, expected):
    assert format_ms(val) == expected


def test_format_delay():
    assert format_delay(None) == "-"
    assert format_delay(62.5) == "62.5ms"


def test_render_line_first_has_no_delay():
    keystroke = CommittedKeystroke(char="a", timestamp=500.0, baseline=100.0)
    assert render_line(0, keystroke) == "0, a, 500, 100, -"
    assert render_line(3, keystroke) == "3, a, 500, 100, 400"


def test_render_log():
    log = (
        CommittedKeystroke(char="a", timestamp=100.0, baseline=100.0),
        CommittedKeystroke(char="b", timestamp=112.25, baseline=100.0),
    )
    assert render_log(log) == ["0, a, 100, 100, -", "1, b, 112.25, 100, 12.25"]
    assert render_log(()) == []
