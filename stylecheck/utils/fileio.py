"""Basic file IO helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from stylecheck.errors import InputNotFound


def read_yaml_file(path: Path) -> Any:
    """Return the parsed YAML if the file exists, otherwise ``None``."""

    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def read_text_file(path: Path) -> str:
    """Return the file contents as UTF-8 text.

    A leading byte-order mark is dropped. Missing, unreadable and non-UTF-8
    files raise :class:`InputNotFound`.
    """

    if not path.exists():
        raise InputNotFound(str(path), "no such file or directory")
    if not path.is_file():
        raise InputNotFound(str(path), "not a regular file")
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise InputNotFound(str(path), f"not valid UTF-8 text ({exc.reason})") from exc
    except OSError as exc:
        raise InputNotFound(str(path), exc.strerror or str(exc)) from exc
