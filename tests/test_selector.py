"""Tests for streaming candidate selection."""

import pytest

from packbuild.errors import EmptyCandidateStreamError
from packbuild.selection.selector import WinningCandidate, is_strictly_smaller, select_smallest


class TestIsStrictlySmaller:
    """Tests for the replacement predicate."""

    def test_smaller_replaces(self):
        assert is_strictly_smaller(b"a", b"ab") is True

    def test_equal_does_not_replace(self):
        assert is_strictly_smaller(b"xy", b"ab") is False

    def test_larger_does_not_replace(self):
        assert is_strictly_smaller(b"abc", b"ab") is False


class TestSelectSmallest:
    """Tests for select_smallest."""

    def test_single_candidate(self):
        """A lone candidate wins, even if it is the original source."""
        winner = select_smallest(["source text"])
        assert winner == WinningCandidate(text="source text", data=b"source text", index=0, candidates_seen=1)
        assert winner.size == 11

    def test_picks_minimum_regardless_of_order(self):
        """Non-monotonic sequences still yield the minimum."""
        winner = select_smallest(["aaaa", "a", "aaa", "aa"])
        assert winner.text == "a"
        assert winner.index == 1
        assert winner.candidates_seen == 4

    def test_minimality_against_every_candidate(self):
        candidates = ["var x=1;", "x=1", "let x = 1 ;", "x=1;", "π=1"]
        winner = select_smallest(candidates)
        assert all(winner.size <= len(c.encode("utf-8")) for c in candidates)

    def test_tie_keeps_first_seen(self):
        """Equal lengths keep the earlier candidate."""
        assert select_smallest(["abc", "xyz"]).text == "abc"
        assert select_smallest(["xyz", "abc"]).text == "xyz"

    def test_compares_bytes_not_characters(self):
        """A 3-byte character ties with three ASCII characters."""
        assert select_smallest(["€", "abc"]).text == "€"
        assert select_smallest(["abc", "€"]).text == "abc"

    def test_fewer_characters_can_lose(self):
        """One 3-byte character loses to two ASCII characters."""
        winner = select_smallest(["€", "ab"])
        assert winner.text == "ab"
        assert winner.data == b"ab"

    def test_winner_bytes_match_encoding(self):
        winner = select_smallest(["héllo"], encoding="utf-8")
        assert winner.data == "héllo".encode("utf-8")
        assert winner.size == 6

    def test_other_encoding(self):
        """Sizes follow the configured encoding."""
        winner = select_smallest(["ab", "é"], encoding="utf-16-le")
        assert winner.text == "é"
        assert winner.size == 2

    def test_empty_sequence_fails(self):
        """No candidates is an error, not a fallback."""
        with pytest.raises(EmptyCandidateStreamError):
            select_smallest([])

    def test_empty_generator_fails(self):
        with pytest.raises(EmptyCandidateStreamError):
            select_smallest(c for c in ())

    def test_empty_string_candidate_is_valid(self):
        winner = select_smallest(["abc", ""])
        assert winner.text == ""
        assert winner.size == 0

    def test_consumes_lazily_in_one_pass(self):
        """Candidates are pulled one at a time from a single-use iterator."""
        pulled = []

        def produce():
            for text in ["ccc", "b", "dd"]:
                pulled.append(text)
                yield text

        stream = produce()
        winner = select_smallest(stream)
        assert winner.text == "b"
        assert pulled == ["ccc", "b", "dd"]
        assert list(stream) == []
