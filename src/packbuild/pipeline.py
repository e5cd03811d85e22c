"""Build orchestration: select, report, assemble, persist."""

from __future__ import annotations

import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, TextIO

from packbuild.config import BuildConfig
from packbuild.engine import CompactionEngine, iter_candidates, passthrough_engine
from packbuild.render.document import build_document
from packbuild.report.budget import write_budget_report
from packbuild.selection.selector import WinningCandidate, select_smallest
from packbuild.utils.paths import mkdir_exist_ok, write_bytes_atomically, write_text_atomically

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Return object for a completed build."""

    packed_path: Path
    document_path: Path
    packed_size: int
    size_limit: int
    candidates_seen: int
    winner_index: int
    margin: float

    @property
    def over_budget(self) -> bool:
        return self.packed_size > self.size_limit


def _read_text(path: Path, encoding: str) -> str:
    # newline="" keeps the source byte-for-byte.
    with path.open("r", encoding=encoding, newline="") as handle:
        return handle.read()


def load_inputs(config: BuildConfig) -> tuple[str, str]:
    """Read the source text and the document template concurrently."""

    with ThreadPoolExecutor(max_workers=2) as pool:
        source_future = pool.submit(_read_text, config.source_file, config.encoding)
        template_future = pool.submit(_read_text, config.template_file, config.encoding)
        return source_future.result(), template_future.result()


def compress_source(
    source: str,
    engine: CompactionEngine,
    engine_options: Mapping[str, Any] | None = None,
    *,
    encoding: str = "utf-8",
    logger: logging.Logger | None = None,
) -> WinningCandidate:
    """Run the engine over ``source`` and keep its smallest candidate."""

    methods = engine(source, dict(engine_options or {}))
    return select_smallest(iter_candidates(methods), encoding=encoding, logger=logger)


def persist_outputs(config: BuildConfig, packed: bytes, document: str) -> tuple[Path, Path]:
    """Write the packed bytes and the assembled document concurrently."""

    with ThreadPoolExecutor(max_workers=2) as pool:
        packed_future = pool.submit(write_bytes_atomically, packed, config.packed_path)
        document_future = pool.submit(write_text_atomically, document, config.document_path, config.encoding)
        return packed_future.result(), document_future.result()


def run_build_pipeline(
    config: BuildConfig,
    *,
    engine: CompactionEngine = passthrough_engine,
    engine_options: Mapping[str, Any] | None = None,
    stream: TextIO | None = None,
    logger: logging.Logger | None = None,
) -> BuildResult:
    """Build the packed artifact and its document for one configuration.

    Any failure propagates to the caller; nothing is retried.
    """

    effective_logger = logger or LOGGER
    report_stream = stream if stream is not None else sys.stderr

    mkdir_exist_ok(config.build_root)
    source, template = load_inputs(config)
    effective_logger.info(
        "build.inputs_loaded source_file=%s source_chars=%s template_file=%s template_chars=%s",
        config.source_file,
        len(source),
        config.template_file,
        len(template),
    )

    winner = compress_source(
        source,
        engine,
        engine_options,
        encoding=config.encoding,
        logger=effective_logger,
    )
    effective_logger.info(
        "build.selected candidates_seen=%s winner_index=%s size=%s",
        winner.candidates_seen,
        winner.index,
        winner.size,
    )

    budget = write_budget_report(
        winner.size,
        config.size_limit,
        report_stream,
        fallback_columns=config.fallback_columns,
        min_columns=config.min_columns,
    )
    document = build_document(template, title=config.title, code=winner.text)

    packed_path, document_path = persist_outputs(config, winner.data, document)
    effective_logger.info(
        "build.written packed_path=%s document_path=%s size=%s limit=%s",
        packed_path,
        document_path,
        winner.size,
        config.size_limit,
    )
    return BuildResult(
        packed_path=packed_path,
        document_path=document_path,
        packed_size=winner.size,
        size_limit=config.size_limit,
        candidates_seen=winner.candidates_seen,
        winner_index=winner.index,
        margin=budget.margin,
    )
