"""Configuration models and loading logic."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_SETTINGS_FILE = Path("configs/settings.yaml")
SETTINGS_FILE_ENV = "PACKBUILD_SETTINGS_FILE"
DEFAULT_ENGINE_FACTORY = "packbuild.engine:passthrough_engine"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ProjectConfig(BaseModel):
    """Document title and log verbosity."""

    title: str = "Traveler"
    log_level: LogLevel = "INFO"


class PathsConfig(BaseModel):
    """Filesystem paths for build inputs, outputs and logs."""

    source_file: Path = Path("./src.js")
    template_file: Path = Path("./shim.html")
    build_root: Path = Path("./build")
    logs_root: Path = Path("./logs")

    def resolved(self, project_root: Path) -> "PathsConfig":
        """Return a copy with project-relative paths resolved to absolute paths."""

        updates: dict[str, Path] = {}
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)
            updates[field_name] = value if value.is_absolute() else (project_root / value).resolve()
        return self.model_copy(update=updates)


class OutputConfig(BaseModel):
    """Artifact names and the text encoding used for sizing and persistence."""

    packed_name: str = "demo.js"
    document_name: str = "demo.html"
    encoding: str = "utf-8"


class BudgetConfig(BaseModel):
    """Byte budget for the packed artifact."""

    size_limit: int = Field(default=1024, gt=0)


class ReportConfig(BaseModel):
    """Terminal width policy for the budget bar."""

    fallback_columns: int = Field(default=80, ge=3)
    min_columns: int = Field(default=10, ge=3)


class EngineConfig(BaseModel):
    """Compaction engine selection."""

    factory: str = DEFAULT_ENGINE_FACTORY
    options: dict[str, Any] = Field(default_factory=dict)


class AppSettings(BaseSettings):
    """Top-level application settings."""

    _yaml_file_override: ClassVar[Path | None] = None

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    budget: BudgetConfig = Field(default_factory=BudgetConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    engine: EngineConfig = Field(default_factory=EngineConfig)

    model_config = SettingsConfigDict(
        env_prefix="PACKBUILD_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Use YAML defaults while allowing env vars to override values."""

        yaml_file = resolve_settings_file(cls._yaml_file_override)
        yaml_settings = YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file)
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
            file_secret_settings,
        )

    def as_dict(self) -> dict[str, object]:
        """Return settings as a standard nested dictionary."""

        return self.model_dump(mode="json")


@dataclass(frozen=True, slots=True)
class BuildConfig:
    """Immutable per-run build parameters handed to the orchestrator."""

    title: str
    size_limit: int
    source_file: Path
    template_file: Path
    build_root: Path
    packed_name: str = "demo.js"
    document_name: str = "demo.html"
    encoding: str = "utf-8"
    fallback_columns: int = 80
    min_columns: int = 10

    def __post_init__(self) -> None:
        if self.size_limit <= 0:
            raise ValueError(f"size_limit must be positive, got {self.size_limit}")

    @property
    def packed_path(self) -> Path:
        return self.build_root / self.packed_name

    @property
    def document_path(self) -> Path:
        return self.build_root / self.document_name

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        *,
        title: str | None = None,
        size_limit: int | None = None,
    ) -> "BuildConfig":
        """Freeze loaded settings, with optional CLI overrides, into a build config."""

        return cls(
            title=settings.project.title if title is None else title,
            size_limit=settings.budget.size_limit if size_limit is None else size_limit,
            source_file=settings.paths.source_file,
            template_file=settings.paths.template_file,
            build_root=settings.paths.build_root,
            packed_name=settings.output.packed_name,
            document_name=settings.output.document_name,
            encoding=settings.output.encoding,
            fallback_columns=settings.report.fallback_columns,
            min_columns=settings.report.min_columns,
        )


def find_project_root(start: Path | None = None) -> Path:
    """Locate the project root by traversing upward for config markers."""

    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / "configs/settings.yaml").exists():
            return candidate
    return current


def resolve_settings_file(override: Path | None = None) -> Path:
    """Resolve settings file from explicit override, env var, or default."""

    chosen = override
    if chosen is None:
        env_value = os.getenv(SETTINGS_FILE_ENV)
        if env_value:
            chosen = Path(env_value)
    if chosen is None:
        chosen = DEFAULT_SETTINGS_FILE

    if not chosen.is_absolute():
        chosen = (find_project_root() / chosen).resolve()
    return chosen


def load_settings(config_file: Path | None = None) -> AppSettings:
    """Load settings with YAML defaults and environment variable overrides."""

    settings_file = resolve_settings_file(config_file)
    project_root = settings_file.parent.parent.resolve()
    AppSettings._yaml_file_override = settings_file
    try:
        settings = AppSettings()
    finally:
        AppSettings._yaml_file_override = None
    resolved_paths = settings.paths.resolved(project_root=project_root)
    return settings.model_copy(update={"paths": resolved_paths})
