"""Shared utility helpers."""

from packbuild.utils.paths import mkdir_exist_ok, write_bytes_atomically, write_text_atomically

__all__ = [
    "mkdir_exist_ok",
    "write_bytes_atomically",
    "write_text_atomically",
]
