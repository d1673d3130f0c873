"""Source code helper utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Generator, Iterable


def iter_source_files(root_paths: Iterable[str], extensions: tuple[str, ...] = (".cs",)) -> Generator[Path, None, None]:
    """Yield input units for the provided paths.

    Files are yielded as given, whatever their suffix. Directories are walked
    recursively in sorted order for files with a matching suffix. Paths that
    do not exist are yielded unchanged so the caller can report them.
    """

    for root in root_paths:
        path = Path(root)
        if path.is_dir():
            for child in sorted(path.rglob("*")):
                if child.suffix in extensions and child.is_file():
                    yield child
        else:
            yield path
