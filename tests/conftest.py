"""Shared test fixtures for MirrorStream test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from mirrorstream.models.media import CanonicalMeta, Candidate
from mirrorstream.utils.http_client import http_client


@pytest.fixture(autouse=True)
def _fresh_http_client() -> Iterator[None]:
    """Drop the shared AsyncClient so each test's event loop gets its own."""
    http_client._client = None
    yield
    http_client._client = None


# ---------------------------------------------------------------------------
# Domain entity fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def movie_meta() -> CanonicalMeta:
    return CanonicalMeta(id="tt0099785", media_type="movie", name="Home Alone", year="1990")


@pytest.fixture()
def series_meta() -> CanonicalMeta:
    return CanonicalMeta(
        id="tt0903747",
        media_type="series",
        name="Breaking Bad",
        release_info="2008–2013",
    )


@pytest.fixture()
def movie_candidate() -> Candidate:
    return Candidate(id="81012345", title="Home Alone", year="1990", provider="netflix")
