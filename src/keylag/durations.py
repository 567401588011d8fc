"""Functions to turn millisecond delays into short display strings."""
import typing

from .util import maybe_int


def format_ms(val: float) -> str:
    return str(maybe_int(round(float(val), 3)))


def format_delay(val: typing.Optional[float]) -> str:
    if val is None:
        return "-"
    return format_ms(val) + "ms"
