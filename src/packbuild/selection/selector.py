"""Streaming selection of the smallest encoded candidate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from packbuild.errors import EmptyCandidateStreamError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WinningCandidate:
    """Smallest candidate seen, with its encoded bytes."""

    text: str
    data: bytes
    index: int
    candidates_seen: int

    @property
    def size(self) -> int:
        return len(self.data)


def is_strictly_smaller(challenger: bytes, incumbent: bytes) -> bool:
    """Return True when ``challenger`` should replace ``incumbent``.

    Equal sizes keep the incumbent, so the first-seen minimum wins ties.
    """

    return len(challenger) < len(incumbent)


def select_smallest(
    candidates: Iterable[str],
    encoding: str = "utf-8",
    logger: logging.Logger | None = None,
) -> WinningCandidate:
    """Consume ``candidates`` once and return the one with the fewest encoded bytes.

    Only the current best is retained. Raises
    :class:`EmptyCandidateStreamError` if the iterable is empty.
    """

    effective_logger = logger or LOGGER
    best_text: str | None = None
    best_data = b""
    best_index = -1
    seen = 0
    for index, text in enumerate(candidates):
        data = text.encode(encoding)
        seen += 1
        if best_text is None or is_strictly_smaller(data, best_data):
            best_text, best_data, best_index = text, data, index
            effective_logger.debug("select.new_best index=%s size=%s", index, len(data))

    if best_text is None:
        raise EmptyCandidateStreamError("compaction engine produced no candidates")
    return WinningCandidate(text=best_text, data=best_data, index=best_index, candidates_seen=seen)
