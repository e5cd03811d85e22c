"""Shared fixtures for packbuild tests."""

import logging
from pathlib import Path

import pytest

TEMPLATE = "<title>{{title_html}}</title><script>var t={{title_js}};</script><script>{{code}}</script>"


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler changes made by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A minimal project tree with settings, source and template."""
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "settings.yaml").write_text(
        "project:\n"
        "  title: Test Demo\n"
        "paths:\n"
        "  source_file: ./src.js\n"
        "  template_file: ./shim.html\n"
        "  build_root: ./build\n"
        "  logs_root: ./logs\n"
        "budget:\n"
        "  size_limit: 64\n",
        encoding="utf-8",
    )
    (tmp_path / "src.js").write_text("let x = 1;\nconsole.log(x);\n", encoding="utf-8")
    (tmp_path / "shim.html").write_text(TEMPLATE, encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings_file(project_dir: Path) -> Path:
    return project_dir / "configs" / "settings.yaml"
