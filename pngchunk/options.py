"""
User options for the pngchunk command line tool.

Options are read from YAML files in the configuration directory
(~/.pngchunk by default) and can be overridden on the command line.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import ruamel.yaml
from ruamel.yaml.error import MarkedYAMLError
from ruamel.yaml.error import YAMLError

from pngchunk import exceptions
from pngchunk.chunk_type import ChunkType
from pngchunk.log import LogLevels

CONF_DIR = "~/.pngchunk"
CONF_BASENAMES = ("config.yaml", "config.yml")


@dataclass
class Options:
    strict: bool = False
    """Reject chunk types whose reserved (third) letter is lowercase."""
    assume_yes: bool = False
    """Do not ask for confirmation before replacing a chunk."""
    default_chunk_type: str = "ruSt"
    """Chunk type used when a command is run without --chunk."""
    termlog_verbosity: str = "info"
    """Log verbosity, one of error, warn, info, debug."""

    def __post_init__(self) -> None:
        self.check()

    def check(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            expected = bool if f.type == "bool" else str
            if not isinstance(value, expected):
                raise exceptions.OptionsError(
                    f"Expected {expected.__name__} for {f.name}, but got {type(value).__name__}."
                )
        if self.termlog_verbosity not in LogLevels:
            raise exceptions.OptionsError(
                f"Invalid termlog_verbosity: {self.termlog_verbosity!r}, expected one of {', '.join(LogLevels)}."
            )
        try:
            ChunkType.from_str(self.default_chunk_type)
        except exceptions.PngChunkException as e:
            raise exceptions.OptionsError(f"Invalid default_chunk_type: {e}") from e

    def keys(self) -> set[str]:
        return {f.name for f in dataclasses.fields(self)}

    def update(self, **kwargs: Any) -> None:
        unknown = set(kwargs) - self.keys()
        if unknown:
            raise exceptions.OptionsError(f"Unknown options: {', '.join(sorted(unknown))}")
        old = dataclasses.asdict(self)
        for k, v in kwargs.items():
            setattr(self, k, v)
        try:
            self.check()
        except exceptions.OptionsError:
            for k, v in old.items():
                setattr(self, k, v)
            raise


def _loader() -> ruamel.yaml.YAML:
    return ruamel.yaml.YAML(typ="safe", pure=True)


def parse(text: str) -> dict[str, Any]:
    """Parse the text of a config file into a mapping of option names to values."""
    try:
        data = _loader().load(text) if text else None
    except MarkedYAMLError as e:
        line = e.problem_mark.line + 1 if e.problem_mark else "?"
        raise exceptions.OptionsError(f"Config error at line {line}: {e.problem}") from e
    except YAMLError as e:
        raise exceptions.OptionsError(f"Could not parse config: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise exceptions.OptionsError("Config error - no keys found.")
    return data


def load(opts: Options, text: str) -> None:
    """Apply the options found in config text. Raises OptionsError for invalid config."""
    opts.update(**parse(text))


def load_paths(opts: Options, *paths: Path | str) -> None:
    """
    Apply every config file that exists, in order, so that later files
    override earlier ones.
    """
    for path in paths:
        path = Path(path).expanduser()
        if not path.is_file():
            continue
        try:
            load(opts, path.read_text(encoding="utf8"))
        except (UnicodeDecodeError, exceptions.OptionsError) as e:
            raise exceptions.OptionsError(f"Error reading {path}: {e}") from e


def config_paths(confdir: Path | str = CONF_DIR) -> list[Path]:
    return [Path(confdir) / name for name in CONF_BASENAMES]
