"""Tests for DetailsService and EpisodeService."""

from __future__ import annotations

import httpx
import pytest
import respx

from mirrorstream.services.details import DetailsService
from mirrorstream.services.episodes import EpisodeService

_MOVIE = {
    "status": "y",
    "title": "Home Alone",
    "year": "1990",
    "genre": "Comedies, Family &amp; Kids",
    "short_cast": "Macaulay Culkin",
    "desc": "A boy defends his home.",
    "hdsd": "HD",
}


def _series(seasons: list) -> dict:
    return {"status": "y", "title": "Breaking Bad", "year": "2008", "season": seasons}


# ---------------------------------------------------------------------------
# DetailsService
# ---------------------------------------------------------------------------


class TestMovieDetails:
    @respx.mock
    @pytest.mark.asyncio()
    async def test_parses_movie(self) -> None:
        route = respx.get(host="net20.cc", path="/post.php").respond(200, json=_MOVIE)

        details = await DetailsService().get_details("netflix", "81012345", "t_hash_t=abc")

        request = route.calls.last.request
        assert request.url.params["id"] == "81012345"
        assert request.headers["Cookie"] == "t_hash_t=abc"
        assert details.title == "Home Alone"
        assert details.category == "Movie"
        assert details.genre == "Comedies, Family & Kids"
        assert details.cast == "Macaulay Culkin"
        assert details.rating == "Not rated"
        assert details.seasons is None

    @respx.mock
    @pytest.mark.asyncio()
    async def test_prime_endpoint(self) -> None:
        respx.get(host="net20.cc", path="/pv/post.php").respond(200, json=_MOVIE)

        details = await DetailsService().get_details("prime", "0ABCDEF")

        assert details.title == "Home Alone"

    @respx.mock
    @pytest.mark.asyncio()
    async def test_status_not_found(self) -> None:
        respx.get(host="net20.cc", path="/post.php").respond(200, json={"status": "n"})

        assert await DetailsService().get_details("netflix", "1") is None

    @respx.mock
    @pytest.mark.asyncio()
    async def test_missing_title(self) -> None:
        respx.get(host="net20.cc", path="/post.php").respond(200, json={"status": "y"})

        assert await DetailsService().get_details("netflix", "1") is None

    @respx.mock
    @pytest.mark.asyncio()
    async def test_empty_body(self) -> None:
        respx.get(host="net20.cc", path="/post.php").respond(200, text="")

        assert await DetailsService().get_details("netflix", "1") is None

    @respx.mock
    @pytest.mark.asyncio()
    async def test_invalid_json(self) -> None:
        respx.get(host="net20.cc", path="/post.php").respond(200, text="{not json")

        assert await DetailsService().get_details("netflix", "1") is None

    @respx.mock
    @pytest.mark.asyncio()
    async def test_network_error(self) -> None:
        respx.get(host="net20.cc", path="/post.php").mock(side_effect=httpx.ConnectError("down"))

        assert await DetailsService().get_details("netflix", "1") is None


class TestSeasonNormalization:
    @respx.mock
    @pytest.mark.asyncio()
    async def test_count_aliases_in_priority_order(self) -> None:
        respx.get(host="net20.cc", path="/post.php").respond(200, json=_series([
            {"id": "s1", "s": "Season 1", "num": "01", "episode_count": "7", "count": 99},
            {"sid": "s2", "number": 2, "totalEpisodes": 13},
            {"id": "s3", "num": "3", "ep_count": "0", "eps": "10"},
        ]))

        details = await DetailsService().get_details("netflix", "70143836")

        assert details.category == "Series"
        assert [(s.id, s.number, s.episode_count) for s in details.seasons] == [
            ("s1", "01", 7),
            ("s2", "2", 13),
            ("s3", "3", 10),
        ]

    @respx.mock
    @pytest.mark.asyncio()
    async def test_inline_episode_list(self) -> None:
        respx.get(host="net20.cc", path="/post.php").respond(200, json=_series([
            {"id": "s1", "num": "1", "episodes": [{"id": "e1"}, {"id": "e2"}]},
        ]))

        details = await DetailsService().get_details("netflix", "70143836")

        assert details.seasons[0].episode_count == 2

    @respx.mock
    @pytest.mark.asyncio()
    async def test_live_fetch_fallback(self) -> None:
        respx.get(host="net20.cc", path="/post.php").respond(200, json=_series([{"id": "s1"}]))
        episodes = respx.get(host="net51.cc", path="/episodes.php").respond(
            200, json={"episodes": [{"id": "e1", "ep": "1"}, {"id": "e2", "ep": "2"}, {"id": "e3", "ep": "3"}]}
        )

        details = await DetailsService().get_details("netflix", "70143836")

        params = episodes.calls.last.request.url.params
        assert params["s"] == "s1"
        assert params["series"] == "70143836"
        assert details.seasons[0].number == "1"
        assert details.seasons[0].episode_count == 3

    @respx.mock
    @pytest.mark.asyncio()
    async def test_live_fetch_failure_keeps_zero(self) -> None:
        respx.get(host="net20.cc", path="/post.php").respond(200, json=_series([{}]))
        respx.get(host="net51.cc", path="/episodes.php").mock(side_effect=httpx.ConnectError("down"))

        details = await DetailsService().get_details("netflix", "70143836")

        assert details.seasons[0].id == "1"
        assert details.seasons[0].episode_count == 0


# ---------------------------------------------------------------------------
# EpisodeService
# ---------------------------------------------------------------------------


class TestEpisodes:
    @respx.mock
    @pytest.mark.asyncio()
    async def test_parses_aliases(self) -> None:
        respx.get(host="net51.cc", path="/episodes.php").respond(200, json={"episodes": [
            {"id": "e1", "episode": "01", "title": "Pilot"},
            {"id": "e2", "ep": 2, "t": "Cat's in the Bag..."},
            {"id": "e3", "ep": "E3"},
            {"episode": "4"},
        ]})

        episodes = await EpisodeService().get_episodes("netflix", "s1", "70143836")

        assert [(e.id, e.episode_number, e.title) for e in episodes] == [
            ("e1", 1, "Pilot"),
            ("e2", 2, "Cat's in the Bag..."),
        ]

    @respx.mock
    @pytest.mark.asyncio()
    async def test_prime_endpoint(self) -> None:
        respx.get(host="net51.cc", path="/tv/pv/episodes.php").respond(
            200, json={"episodes": [{"id": "p1", "ep": "1"}]}
        )

        episodes = await EpisodeService().get_episodes("prime", "s1", "0ABCDEF")

        assert episodes[0].id == "p1"

    @respx.mock
    @pytest.mark.asyncio()
    async def test_network_error_yields_empty(self) -> None:
        respx.get(host="net51.cc", path="/episodes.php").mock(side_effect=httpx.ReadTimeout("slow"))

        assert await EpisodeService().get_episodes("netflix", "s1", "70143836") == []

    @respx.mock
    @pytest.mark.asyncio()
    async def test_missing_list_yields_empty(self) -> None:
        respx.get(host="net51.cc", path="/episodes.php").respond(200, json={"episodes": None})

        assert await EpisodeService().get_episodes("netflix", "s1", "70143836") == []
