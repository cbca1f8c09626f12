"""Tests for the title matching ladder."""

from __future__ import annotations

from mirrorstream.models.media import CanonicalMeta, Candidate
from mirrorstream.utils.matcher import canonical_year, find_best_match

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _c(cid: str, title: str, year: str | None = None) -> Candidate:
    return Candidate(id=cid, title=title, year=year, provider="prime")


def _meta(name: str, year: str | None = None, release_info: str | None = None) -> CanonicalMeta:
    return CanonicalMeta(id="tt0000001", media_type="movie", name=name, year=year, release_info=release_info)


# ---------------------------------------------------------------------------
# canonical_year
# ---------------------------------------------------------------------------


class TestCanonicalYear:
    def test_uses_year(self) -> None:
        assert canonical_year(_meta("X", year="1990")) == 1990

    def test_falls_back_to_release_info(self) -> None:
        assert canonical_year(_meta("X", release_info="1990–1991")) == 1990

    def test_unparsable_year_falls_back(self) -> None:
        assert canonical_year(_meta("X", year="TBA", release_info="2001")) == 2001

    def test_absent(self) -> None:
        assert canonical_year(_meta("X")) is None


# ---------------------------------------------------------------------------
# find_best_match
# ---------------------------------------------------------------------------


class TestEmptyInput:
    def test_empty_list(self, movie_meta: CanonicalMeta) -> None:
        assert find_best_match(movie_meta, []) is None

    def test_none_list(self, movie_meta: CanonicalMeta) -> None:
        assert find_best_match(movie_meta, None) is None


class TestExactWithYear:
    def test_exact_title_and_year(self, movie_meta: CanonicalMeta, movie_candidate: Candidate) -> None:
        assert find_best_match(movie_meta, [movie_candidate]) == movie_candidate

    def test_beats_earlier_weaker_candidates(self, movie_meta: CanonicalMeta) -> None:
        candidates = [
            _c("1", "Home Alone 2: Lost in New York", "1990"),
            _c("2", "Home Alone", "2005"),
            _c("3", "HOME ALONE!", "1991"),
        ]
        assert find_best_match(movie_meta, candidates).id == "3"

    def test_missing_candidate_year_is_consistent(self, movie_meta: CanonicalMeta) -> None:
        candidates = [_c("1", "Home Alone"), _c("2", "Home Alone", "1990")]
        assert find_best_match(movie_meta, candidates).id == "1"

    def test_unparsable_candidate_year_is_absent(self, movie_meta: CanonicalMeta) -> None:
        assert find_best_match(movie_meta, [_c("1", "Home Alone", "n/a")]).id == "1"

    def test_year_from_release_info(self) -> None:
        meta = _meta("Twin Peaks", release_info="1990–1991")
        candidates = [_c("1", "Twin Peaks", "2017"), _c("2", "Twin Peaks", "1990")]
        assert find_best_match(meta, candidates).id == "2"


class TestExactIgnoringYear:
    def test_title_only_when_years_disagree(self, movie_meta: CanonicalMeta) -> None:
        candidates = [_c("1", "Home Alone", "2005"), _c("2", "Home Alone", "2010")]
        assert find_best_match(movie_meta, candidates).id == "1"

    def test_exact_title_beats_fuzzy(self, movie_meta: CanonicalMeta) -> None:
        candidates = [_c("1", "Home Alone 3", "1990"), _c("2", "Home Alone", "2005")]
        assert find_best_match(movie_meta, candidates).id == "2"


class TestFuzzyContainment:
    def test_guardrail_rejects_unrelated_and_sequel(self, movie_meta: CanonicalMeta) -> None:
        candidates = [
            _c("1", "A Girl Walks Home Alone at Night", "2014"),
            _c("2", "Home Alone 2", "1992"),
        ]
        assert find_best_match(movie_meta, candidates) is None

    def test_containment_with_close_year(self, movie_meta: CanonicalMeta) -> None:
        assert find_best_match(movie_meta, [_c("1", "Home Alone (Extended)", "1991")]).id == "1"

    def test_reverse_containment(self) -> None:
        meta = _meta("The Matrix", year="1999")
        assert find_best_match(meta, [_c("1", "Matrix", "1999")]).id == "1"

    def test_length_guard_without_year(self) -> None:
        meta = _meta("The Matrix")
        assert find_best_match(meta, [_c("1", "Matrix")]).id == "1"

    def test_length_guard_rejects_long_title_without_year(self, movie_meta: CanonicalMeta) -> None:
        assert find_best_match(movie_meta, [_c("1", "A Girl Walks Home Alone at Night")]) is None

    def test_short_title_never_fuzzy(self) -> None:
        meta = _meta("Up", year="2009")
        assert find_best_match(meta, [_c("1", "Upgrade", "2009")]) is None

    def test_short_title_still_exact(self) -> None:
        meta = _meta("It", year="2017")
        assert find_best_match(meta, [_c("1", "It", "2017")]).id == "1"

    def test_empty_candidate_title_ignored(self) -> None:
        meta = _meta("Heat")
        assert find_best_match(meta, [_c("1", "???")]) is None


class TestConfigurableConstants:
    def test_wider_year_tolerance(self, movie_meta: CanonicalMeta) -> None:
        candidates = [_c("1", "Home Alone 2", "1992")]
        assert find_best_match(movie_meta, candidates, year_tolerance=2).id == "1"

    def test_wider_length_diff(self) -> None:
        meta = _meta("Home Alone")
        candidates = [_c("1", "Home Alone: The Holiday")]
        assert find_best_match(meta, candidates) is None
        assert find_best_match(meta, candidates, max_length_diff=20).id == "1"


class TestUnmatchableCanonical:
    def test_punctuation_only_name(self) -> None:
        assert find_best_match(_meta("!!!"), [_c("1", "???")]) is None
