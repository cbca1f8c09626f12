import asyncio
import html
from typing import Any, Dict, List, Optional

import httpx

from mirrorstream.models.media import ContentDetails, Season
from mirrorstream.services.episodes import episode_service
from mirrorstream.utils.helpers import first_field, parse_int
from mirrorstream.utils.http_client import http_client
from mirrorstream.utils.logger import provider_logger
from mirrorstream.utils.providers import details_url, provider_headers

# ===========================
# Season Fields
# ===========================
SEASON_ID_FIELDS = ("id", "sid")
SEASON_NUMBER_FIELDS = ("num", "number")
EPISODE_COUNT_FIELDS = (
    "ep_count",
    "total_episodes",
    "episode_count",
    "eps",
    "epCount",
    "episodes_count",
    "episode_count_total",
    "totalEpisodes",
    "count",
)


# ===========================
# Details Service Class
# ===========================
class DetailsService:

    def _declared_episode_count(self, season: Dict[str, Any]) -> int:
        for field in EPISODE_COUNT_FIELDS:
            count = parse_int(season.get(field))
            if count and count > 0:
                return count

        inline_episodes = season.get("episodes")
        if isinstance(inline_episodes, list):
            return len(inline_episodes)

        return 0

    async def _live_episode_count(self, provider: str, season_id: str, series_id: str,
                                  cookie_header: Optional[str]) -> int:
        try:
            raw_episodes = await episode_service.fetch_raw_episodes(provider, season_id, series_id, cookie_header)
        except (httpx.HTTPError, ValueError) as e:
            provider_logger.debug(f"Episode count fallback failed for season {season_id}: {type(e).__name__}")
            return 0
        return len(raw_episodes) if raw_episodes else 0

    async def _normalize_season(self, provider: str, series_id: str, season: Dict[str, Any],
                                index: int, cookie_header: Optional[str]) -> Season:
        season_id = str(first_field(season, SEASON_ID_FIELDS) or index + 1)
        number = str(first_field(season, SEASON_NUMBER_FIELDS) or index + 1)

        episode_count = self._declared_episode_count(season)
        if episode_count == 0:
            episode_count = await self._live_episode_count(provider, season_id, series_id, cookie_header)

        return Season(id=season_id, number=number, episode_count=episode_count)

    async def _normalize_seasons(self, provider: str, series_id: str, raw_seasons: List[Any],
                                 cookie_header: Optional[str]) -> List[Season]:
        tasks = [
            self._normalize_season(provider, series_id, season if isinstance(season, dict) else {}, index, cookie_header)
            for index, season in enumerate(raw_seasons)
        ]
        return list(await asyncio.gather(*tasks))

    async def get_details(self, provider: str, content_id: str,
                          cookie_header: Optional[str] = None) -> Optional[ContentDetails]:
        provider_logger.debug(f"Fetching {provider} details: {content_id}")

        try:
            response = await http_client.get(
                details_url(provider),
                params={"id": content_id},
                headers=provider_headers(cookie_header)
            )

            if not response.text:
                provider_logger.info(f"Empty {provider} details for {content_id}")
                return None

            data = response.json()

            if not isinstance(data, dict) or data.get("status") != "y" or not data.get("title"):
                provider_logger.info(f"No {provider} content for {content_id}")
                return None

            raw_seasons = data.get("season")
            is_series = isinstance(raw_seasons, list) and len(raw_seasons) > 0

            seasons = None
            if is_series:
                seasons = await self._normalize_seasons(provider, content_id, raw_seasons, cookie_header)

            genre = html.unescape(str(data["genre"])) if data.get("genre") else "Unknown"

            details = ContentDetails(
                title=str(data["title"]),
                year=str(data.get("year") or "Unknown"),
                language=str(data.get("d_lang") or "Unknown"),
                category="Series" if is_series else "Movie",
                genre=genre,
                cast=str(data.get("short_cast") or data.get("cast") or "Unknown"),
                description=str(data.get("desc") or "No description available"),
                rating=str(data.get("ua") or "Not rated"),
                match=str(data.get("match") or "N/A"),
                runtime=str(data.get("runtime") or "Unknown"),
                quality=str(data.get("hdsd") or "Unknown"),
                creator=str(data["creator"]) if data.get("creator") else None,
                director=str(data["director"]) if data.get("director") else None,
                seasons=seasons,
                content_warning=str(data["m_reason"]) if data.get("m_reason") else None
            )

            provider_logger.debug(
                f"{provider} details: '{details.title}' ({details.category}, {len(seasons or [])} seasons)"
            )
            return details

        except (httpx.HTTPError, ValueError) as e:
            provider_logger.error(f"{provider} details fetch error: {type(e).__name__}")
            return None

# ===========================
# Singleton Instance
# ===========================
details_service = DetailsService()
