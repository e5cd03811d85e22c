"""Tests for the compaction engine adapter."""

import pytest

from packbuild.engine import PackMethod, iter_candidates, load_engine, passthrough_engine
from packbuild.errors import EngineLoadError


class TestIterCandidates:
    """Tests for flattening pack methods."""

    def test_baseline_then_results_reversed(self):
        methods = [
            PackMethod("first", "base1", (("r1", "x1"), ("r2", "x2"), ("r3", "x3"))),
            PackMethod("second", "base2"),
        ]
        assert list(iter_candidates(methods)) == ["base1", "x3", "x2", "x1", "base2"]

    def test_no_methods(self):
        assert list(iter_candidates([])) == []

    def test_pulls_methods_lazily(self):
        """Later methods are not produced until earlier candidates are consumed."""
        produced = []

        def methods():
            produced.append("a")
            yield PackMethod("a", "A")
            produced.append("b")
            yield PackMethod("b", "B")

        stream = iter_candidates(methods())
        assert next(stream) == "A"
        assert produced == ["a"]
        assert list(stream) == ["B"]
        assert produced == ["a", "b"]


class TestPassthroughEngine:
    """Tests for the built-in engine."""

    def test_single_unchanged_candidate(self):
        methods = list(passthrough_engine("let x=1", {}))
        assert methods == [PackMethod(name="passthrough", contents="let x=1")]
        assert list(iter_candidates(methods)) == ["let x=1"]


class TestLoadEngine:
    """Tests for resolving engine factory paths."""

    def test_loads_callable(self):
        assert load_engine("packbuild.engine:passthrough_engine") is passthrough_engine

    def test_dotted_attribute(self):
        from packbuild.config import BuildConfig

        assert load_engine("packbuild.config:BuildConfig.from_settings") == BuildConfig.from_settings

    @pytest.mark.parametrize(
        "factory",
        [
            "packbuild.engine",
            ":passthrough_engine",
            "packbuild.engine:",
            "packbuild.no_such_module:engine",
            "packbuild.engine:no_such_engine",
            "packbuild.engine:LOGGER",
        ],
    )
    def test_bad_factory_paths(self, factory):
        with pytest.raises(EngineLoadError):
            load_engine(factory)
