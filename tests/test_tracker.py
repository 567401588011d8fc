import pytest

from keylag.capture.hwtypes import DeletionSignal, KeyClass, KeyPressed, Reset, TextChanged
from keylag.capture.keyclass import KeyClassifier
from keylag.editor.reconcile import CommittedKeystroke, State
from keylag.editor.tracker import DelayTracker
from keylag.settings import Settings


@pytest.fixture
def tracker():
    return DelayTracker(Settings.for_test())


@pytest.mark.parametrize(
    "key,expected",
    (
        ("a", KeyClass.CHARACTER),
        ("Z", KeyClass.CHARACTER),
        (" ", KeyClass.CHARACTER),
        ("Enter", KeyClass.CHARACTER),
        ("Tab", KeyClass.CHARACTER),
        ("é", KeyClass.CHARACTER),
        ("Backspace", KeyClass.DELETION),
        ("Delete", KeyClass.DELETION),
        ("ArrowLeft", KeyClass.IGNORED),
        ("PageDown", KeyClass.IGNORED),
        ("Shift", KeyClass.IGNORED),
        ("CapsLock", KeyClass.IGNORED),
        ("Escape", KeyClass.IGNORED),
        ("F1", KeyClass.IGNORED),
        ("F12", KeyClass.IGNORED),
        ("PrintScreen", KeyClass.IGNORED),
        ("ContextMenu", KeyClass.IGNORED),
    ),
)
def test_classify(key, expected):
    assert KeyClassifier().classify(key) is expected


def test_normalize():
    classifier = KeyClassifier()
    assert classifier.normalize("Enter") == "\\n"
    assert classifier.normalize("Tab") == "\\t"
    assert classifier.normalize("q") == "q"


def test_typing_a_word(tracker):
    for i, c in enumerate("hey"):
        tracker.key_pressed(c, 100.0 + 40 * i)
        tracker.text_changed("hey"[: i + 1])
    assert tracker.text == "hey"
    assert tracker.keystroke_count == 3
    assert tracker.delays == [40, 40]
    assert tracker.average_delay == 40
    assert tracker.render_lines() == [
        "0, h, 100, 100, -",
        "1, e, 140, 100, 40",
        "2, y, 180, 140, 40",
    ]


def test_ignored_keys_never_queue(tracker):
    tracker.key_pressed("Shift", 90)
    tracker.key_pressed("A", 100)
    tracker.key_pressed("ArrowLeft", 110)
    assert [e.key for e in tracker.current.pending_queue] == ["A"]


def test_deletion_keys_are_a_separate_signal(tracker):
    tracker.key_pressed("a", 100)
    tracker.text_changed("a")
    tracker.key_pressed("Backspace", 200)
    assert not tracker.current.pending_queue
    assert tracker.last_deletion_time == 200
    tracker.text_changed("")
    assert tracker.keystroke_count == 0
    assert tracker.current.last_commit_time == 100


def test_enter_is_stored_escaped(tracker):
    tracker.key_pressed("Enter", 100)
    tracker.text_changed("\n")
    assert tracker.committed_log == (CommittedKeystroke(char="\\n", timestamp=100, baseline=100),)
    assert tracker.render_lines() == ["0, \\n, 100, 100, -"]


def test_reset(tracker):
    tracker.key_pressed("a", 100)
    tracker.text_changed("a")
    tracker.key_pressed("Delete", 150)
    tracker.key_pressed("b", 200)
    tracker.reset()
    assert tracker.current == State.initial()
    assert tracker.last_deletion_time is None
    assert tracker.average_delay is None
    assert tracker.summary is None


def test_handle_dispatches(tracker):
    for notification in [
        KeyPressed(key="a", timestamp=100),
        KeyPressed(key="b", timestamp=130),
        TextChanged(text="ab"),
        DeletionSignal(key="Backspace", timestamp=150),
        TextChanged(text="a"),
    ]:
        tracker.handle(notification)
    assert tracker.text == "a"
    assert tracker.keystroke_count == 1
    assert tracker.last_deletion_time == 150
    tracker.handle(Reset())
    assert tracker.text == ""


def test_state_is_replaced_not_mutated(tracker):
    before = tracker.current
    tracker.key_pressed("a", 100)
    assert tracker.current is not before
    assert before == State.initial()
