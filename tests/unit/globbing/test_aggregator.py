"""Unit tests for merging per-pattern results."""

from pathlib import Path

import pytest
from fileotter.globbing.aggregator import aggregate, canonical_key


class TestCanonicalKey:
    """Tests for the de-duplication key."""

    def test_lexical_normalisation(self) -> None:
        """Redundant separators and . segments do not change the key."""
        assert canonical_key(Path("/a/./b//c")) == canonical_key(Path("/a/b/c"))

    def test_relative_paths_anchor_at_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Relative paths compare equal to their absolute counterparts."""
        monkeypatch.chdir(tmp_path)

        assert canonical_key(Path("x.txt")) == canonical_key(tmp_path / "x.txt")


class TestAggregate:
    """Tests for aggregate()."""

    def test_union_sorted_by_string(self) -> None:
        """Results of all patterns are merged and sorted."""
        result = aggregate([[Path("/b"), Path("/a")], [Path("/c")]])

        assert result == [Path("/a"), Path("/b"), Path("/c")]

    def test_duplicates_across_patterns_removed(self) -> None:
        """A path matched by two patterns appears once."""
        result = aggregate([[Path("/a"), Path("/b")], [Path("/b"), Path("/a/")]])

        assert result == [Path("/a"), Path("/b")]

    def test_unsorted_keeps_first_seen_order(self) -> None:
        """Without sorting, pattern order then discovery order is kept."""
        result = aggregate(
            [[Path("/z"), Path("/m")], [Path("/a"), Path("/z")]],
            sort=False,
        )

        assert result == [Path("/z"), Path("/m"), Path("/a")]

    def test_sort_is_by_string_not_parts(self) -> None:
        """Ordering is plain string order of the path."""
        result = aggregate([[Path("/a/b"), Path("/a-b"), Path("/a.b")]])

        assert result == [Path("/a-b"), Path("/a.b"), Path("/a/b")]

    def test_empty(self) -> None:
        """No patterns or no matches give an empty list."""
        assert aggregate([]) == []
        assert aggregate([[], []]) == []
