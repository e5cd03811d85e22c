"""Build failure types."""

from __future__ import annotations

import json
from pathlib import Path


class NotADirectoryBuildError(NotADirectoryError):
    """The build output path exists but is not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Build output path exists and is not a directory: {path}")
        self.path = path


class UndefinedTemplateVariableError(KeyError):
    """A template placeholder has no value in the variable set."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Template has undefined variable: {json.dumps(self.name)}"


class EmptyCandidateStreamError(ValueError):
    """The compaction engine produced no candidates to choose from."""


class EngineLoadError(ImportError):
    """The configured compaction engine could not be resolved."""
