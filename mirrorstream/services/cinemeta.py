from typing import Optional

import httpx

from mirrorstream.config.settings import settings
from mirrorstream.models.media import CanonicalMeta
from mirrorstream.utils.http_client import http_client
from mirrorstream.utils.logger import metadata_logger

# ===========================
# Cinemeta Service Class
# ===========================
class CinemetaService:

    async def get_metadata(self, media_type: str, imdb_id: str) -> Optional[CanonicalMeta]:
        metadata_logger.debug(f"Fetching Cinemeta: {media_type}/{imdb_id}")

        try:
            url = f"{settings.CINEMETA_URL}/meta/{media_type}/{imdb_id}.json"
            response = await http_client.get(url, timeout=settings.METADATA_TIMEOUT)

            if response.status_code != 200:
                metadata_logger.error(f"Cinemeta API {response.status_code}")
                return None

            data = response.json()
            meta = data.get("meta") if isinstance(data, dict) else None

            if not isinstance(meta, dict) or not meta.get("name"):
                metadata_logger.info(f"No Cinemeta metadata: {imdb_id}")
                return None

            year = meta.get("year")
            release_info = meta.get("releaseInfo")

            return CanonicalMeta(
                id=str(meta.get("id") or imdb_id),
                media_type="series" if media_type == "series" else "movie",
                name=str(meta["name"]),
                year=str(year) if year else None,
                release_info=str(release_info) if release_info else None
            )

        except (httpx.HTTPError, ValueError) as e:
            metadata_logger.error(f"Cinemeta fetch error: {type(e).__name__}")
            return None

# ===========================
# Singleton Instance
# ===========================
cinemeta_service = CinemetaService()
