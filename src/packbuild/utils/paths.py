"""Path and filesystem helper functions."""

from __future__ import annotations

import os
from pathlib import Path
from uuid import uuid4

from packbuild.errors import NotADirectoryBuildError


def mkdir_exist_ok(path: Path) -> Path:
    """Create a single directory unless it already exists.

    Unlike ``Path.mkdir(exist_ok=True)`` this rejects a pre-existing
    non-directory entry with :class:`NotADirectoryBuildError`, and it does
    not create missing parents.
    """

    try:
        path.mkdir()
    except FileExistsError:
        if not path.is_dir():
            raise NotADirectoryBuildError(path) from None
    return path


def _atomic_temp_path(target_path: Path) -> Path:
    """Create a unique temp path next to the target for atomic replacement."""

    return target_path.parent / f".{target_path.name}.{uuid4().hex}.tmp"


def write_bytes_atomically(data: bytes, output_path: Path) -> Path:
    """Write raw bytes atomically via temporary file then os.replace."""

    temp_path = _atomic_temp_path(output_path)
    try:
        temp_path.write_bytes(data)
        os.replace(temp_path, output_path)
    finally:
        if temp_path.exists():
            temp_path.unlink()
    return output_path


def write_text_atomically(text: str, output_path: Path, encoding: str = "utf-8") -> Path:
    """Write text atomically; newlines are written as-is."""

    return write_bytes_atomically(text.encode(encoding), output_path)
