import argparse
import logging
import pathlib

from .durations import format_delay
from .editor.tracker import DelayTracker
from .recording import load_script, replay
from .settings import Settings

replay_parser = argparse.ArgumentParser(prog="keylag-replay")
replay_parser.add_argument("script", type=pathlib.Path)
replay_parser.add_argument("--settings", type=pathlib.Path)


def replay_cli(argv=None):
    args = replay_parser.parse_args(argv)
    settings = Settings.default() if args.settings is None else Settings.load(args.settings)
    logging.basicConfig(level=settings.logging_level)
    tracker = replay(load_script(args.script), DelayTracker(settings))
    for line in tracker.render_lines():
        print(line)
    print(f"keystrokes: {tracker.keystroke_count}")
    print(f"average delay: {format_delay(tracker.average_delay)}")
    return 0
