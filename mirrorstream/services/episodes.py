from typing import List, Optional

import httpx

from mirrorstream.models.media import Episode
from mirrorstream.utils.helpers import first_field, parse_int
from mirrorstream.utils.http_client import http_client
from mirrorstream.utils.logger import provider_logger
from mirrorstream.utils.providers import episodes_url, provider_headers

# ===========================
# Episode Fields
# ===========================
EPISODE_ID_FIELDS = ("id", "eid")
EPISODE_NUMBER_FIELDS = ("episode", "ep", "number", "num")
EPISODE_TITLE_FIELDS = ("title", "t")


# ===========================
# Episode Service Class
# ===========================
class EpisodeService:

    async def fetch_raw_episodes(self, provider: str, season_id: str, series_id: str,
                                 cookie_header: Optional[str] = None) -> Optional[list]:
        response = await http_client.get(
            episodes_url(provider),
            params={"s": season_id, "series": series_id},
            headers=provider_headers(cookie_header)
        )

        if response.status_code != 200:
            provider_logger.error(f"{provider} episodes HTTP {response.status_code}")
            return None

        if not response.text:
            return None

        data = response.json()
        episodes = data.get("episodes") if isinstance(data, dict) else None
        return episodes if isinstance(episodes, list) else None

    async def get_episodes(self, provider: str, season_id: str, series_id: str,
                           cookie_header: Optional[str] = None) -> List[Episode]:
        provider_logger.debug(f"Fetching {provider} episodes: season {season_id} of {series_id}")

        try:
            raw_episodes = await self.fetch_raw_episodes(provider, season_id, series_id, cookie_header)
        except (httpx.HTTPError, ValueError) as e:
            provider_logger.error(f"{provider} episodes fetch error: {type(e).__name__}")
            return []

        if not raw_episodes:
            provider_logger.debug(f"No episodes for season {season_id}")
            return []

        episodes = []
        for item in raw_episodes:
            if not isinstance(item, dict):
                continue

            episode_id = first_field(item, EPISODE_ID_FIELDS)
            episode_number = parse_int(first_field(item, EPISODE_NUMBER_FIELDS))
            if episode_id is None or episode_number is None:
                continue

            title = first_field(item, EPISODE_TITLE_FIELDS)
            episodes.append(Episode(
                id=str(episode_id),
                episode_number=episode_number,
                title=str(title) if title else None
            ))

        provider_logger.debug(f"Season {season_id}: {len(episodes)} episodes")
        return episodes

# ===========================
# Singleton Instance
# ===========================
episode_service = EpisodeService()
