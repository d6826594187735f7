"""Reading of INI-style configuration files that hold credentials."""

from __future__ import annotations

import os
import re
import stat
from typing import Callable, Iterable, Optional

Callback = Callable[[str, str, str], object]

_COMMENT_PREFIXES = (";", "#")
_INLINE_COMMENT = re.compile(r"\s;")
_SEPARATOR = re.compile(r"[=:]")


class ConfigError(Exception):
    """Raised when a configuration file cannot be parsed."""

    def __init__(self, message: str, lineno: Optional[int] = None) -> None:
        super().__init__(message)
        self.lineno = lineno


class ConfigPermissionError(ConfigError):
    """Raised when a configuration file is readable by group or others."""


def _strip_inline_comment(value: str) -> str:
    return _INLINE_COMMENT.split(value, maxsplit=1)[0].rstrip()


def _parse_lines(lines: Iterable[str], callback: Callback) -> Optional[int]:
    """Feed each entry to ``callback``; return the first bad line number, if any."""
    section = ""
    first_error: Optional[int] = None

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if lineno == 1:
            line = line.lstrip("\ufeff")
        if not line or line.startswith(_COMMENT_PREFIXES):
            continue

        if line.startswith("["):
            end = line.find("]")
            if end < 0:
                first_error = first_error or lineno
            else:
                section = line[1:end].strip()
            continue

        match = _SEPARATOR.search(line)
        if match is None:
            first_error = first_error or lineno
            continue

        name = line[: match.start()].strip()
        value = _strip_inline_comment(line[match.end():].strip())
        if callback(section, name, value) is False:
            first_error = first_error or lineno

    return first_error


def parse_config(filename, callback: Callback) -> None:
    """Parse ``filename`` and call ``callback(section, name, value)`` per entry.

    The file must not be readable by group or others. A callback that
    returns ``False`` rejects its entry; parsing goes on and a
    :class:`ConfigError` naming the first bad line is raised at the end.
    Failure to open the file raises :class:`OSError`.
    """
    with open(filename, encoding="utf-8") as fp:
        mode = os.fstat(fp.fileno()).st_mode
        if mode & (stat.S_IRGRP | stat.S_IROTH):
            raise ConfigPermissionError(
                f"{filename}: must not be readable by group or others"
            )
        first_error = _parse_lines(fp, callback)

    if first_error is not None:
        raise ConfigError(f"{filename}: parse error on line {first_error}", first_error)