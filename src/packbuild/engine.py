"""Adapter around the external compaction engine."""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Protocol

from packbuild.errors import EngineLoadError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PackMethod:
    """One compaction strategy's output.

    ``contents`` is the strategy's baseline candidate; ``results`` holds
    ``(label, candidate)`` pairs in the order the strategy produced them.
    """

    name: str
    contents: str
    results: tuple[tuple[str, str], ...] = ()


class CompactionEngine(Protocol):
    """Callable producing a lazy, single-pass sequence of pack methods."""

    def __call__(self, source: str, options: Mapping[str, Any]) -> Iterable[PackMethod]: ...


def passthrough_engine(source: str, options: Mapping[str, Any]) -> Iterator[PackMethod]:
    """Engine that proposes the source unchanged as its only candidate."""

    yield PackMethod(name="passthrough", contents=source)


def load_engine(factory_path: str) -> CompactionEngine:
    """Resolve a ``package.module:attribute`` path to an engine callable."""

    module_name, sep, attribute = factory_path.partition(":")
    if not sep or not module_name or not attribute:
        raise EngineLoadError(f"engine factory must look like 'module:attribute', got {factory_path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise EngineLoadError(f"cannot import engine module {module_name!r}: {exc}") from exc

    target: Any = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise EngineLoadError(f"engine {factory_path!r} has no attribute {part!r}") from exc
    if not callable(target):
        raise EngineLoadError(f"engine {factory_path!r} is not callable")
    LOGGER.debug("engine.loaded factory=%s", factory_path)
    return target


def iter_candidates(methods: Iterable[PackMethod]) -> Iterator[str]:
    """Flatten pack methods into candidate strings.

    Each method contributes its baseline first, then its results from the
    last produced to the first.
    """

    for method in methods:
        yield method.contents
        for _, candidate in reversed(method.results):
            yield candidate
