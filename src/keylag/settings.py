import dataclasses
import json
import logging
import pathlib
import typing

import cattrs
from cattrs.gen import make_dict_structure_fn, override

from .capture.keyclass import DELETION_KEYS, EXCLUDED_KEYS, KEY_SUBSTITUTIONS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

settings_converter = cattrs.Converter()


def structure_log_level(v: str, typ: type[str]):
    level = v.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unexpected log level {v}")
    return level


@dataclasses.dataclass(kw_only=True)
class Settings:
    _path: typing.Optional[pathlib.Path]
    excluded_keys: list[str]
    deletion_keys: list[str]
    key_substitutions: dict[str, str]
    log_level: str

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)

    def save(self, dest: typing.Optional[pathlib.Path] = None):
        if dest is None:
            dest = self._path
        if dest is None:
            raise ValueError("No path to save settings to")
        raw = settings_converter.unstructure(self)
        del raw["_path"]
        with dest.open("w") as out:
            json.dump(raw, out, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        with src.open() as infile:
            raw = json.load(infile)
        # anything left out of the file falls back to the built-in tables
        defaults = settings_converter.unstructure(cls.default())
        defaults.update(raw)
        defaults["_path"] = src
        return settings_converter.structure(defaults, cls)

    @classmethod
    def default(cls):
        return settings_converter.structure(
            {
                "_path": None,
                "excluded_keys": sorted(EXCLUDED_KEYS),
                "deletion_keys": sorted(DELETION_KEYS),
                "key_substitutions": KEY_SUBSTITUTIONS,
                "log_level": "WARNING",
            },
            cls,
        )

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "_path": "test.settings.json",
                "excluded_keys": sorted(EXCLUDED_KEYS),
                "deletion_keys": sorted(DELETION_KEYS),
                "key_substitutions": KEY_SUBSTITUTIONS,
                "log_level": "DEBUG",
            },
            cls,
        )


settings_converter.register_structure_hook(pathlib.Path, lambda v, _: pathlib.Path(v))
settings_converter.register_unstructure_hook(pathlib.Path, str)
settings_converter.register_structure_hook(
    Settings,
    make_dict_structure_fn(Settings, settings_converter, log_level=override(struct_hook=structure_log_level)),
)
