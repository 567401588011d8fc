import pytest

from keylag.capture.hwtypes import KeyPressed, Reset, TextChanged
from keylag.commontypes import ScriptError
from keylag.editor.tracker import DelayTracker
from keylag.recording import Recorder, decode_script, load_script, replay
from keylag.scripts import replay_cli
from keylag.settings import Settings

SCRIPT = b"""[
    {"type": "KeyPressed", "key": "h", "timestamp": 100.0},
    {"type": "TextChanged", "text": "h"},
    {"type": "KeyPressed", "key": "i", "timestamp": 175.5},
    {"type": "TextChanged", "text": "hi"},
    {"type": "TextChanged", "text": "hi there"}
]"""


def test_decode_script():
    assert decode_script(SCRIPT) == [
        KeyPressed(key="h", timestamp=100.0),
        TextChanged(text="h"),
        KeyPressed(key="i", timestamp=175.5),
        TextChanged(text="hi"),
        TextChanged(text="hi there"),
    ]


@pytest.mark.parametrize(
    "raw",
    (
        b"not json",
        b'[{"type": "Unknown"}]',
        b'[{"type": "KeyPressed", "key": "a"}]',
    ),
)
def test_decode_script_invalid(raw):
    with pytest.raises(ScriptError):
        decode_script(raw)


def test_replay_includes_paste():
    tracker = replay(decode_script(SCRIPT), DelayTracker(Settings.for_test()))
    assert tracker.text == "hi there"
    # the pasted " there" is never measured
    assert tracker.keystroke_count == 2
    assert tracker.average_delay == 75.5


def test_recorder_round_trip(tmp_path):
    settings = Settings.for_test()
    recorder = Recorder(DelayTracker(settings))
    recorder.key_pressed("a", 100)
    recorder.key_pressed("Shift", 110)
    recorder.key_pressed("B", 140)
    recorder.text_changed("aB")
    recorder.reset()
    recorder.key_pressed("c", 300)
    recorder.text_changed("c")
    path = tmp_path / "script.json"
    recorder.save_script(path)

    script = load_script(path)
    assert script[-3:] == [Reset(), KeyPressed(key="c", timestamp=300), TextChanged(text="c")]
    replayed = replay(script, DelayTracker(settings))
    assert replayed.current == recorder.wrapped.current


def test_replay_cli(tmp_path, capsys):
    path = tmp_path / "script.json"
    path.write_bytes(SCRIPT)
    assert replay_cli([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "0, h, 100, 100, -",
        "1, i, 175.5, 100, 75.5",
        "keystrokes: 2",
        "average delay: 75.5ms",
    ]
