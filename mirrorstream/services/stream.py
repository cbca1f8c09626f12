from typing import Dict, List, Optional

import httpx

from mirrorstream.config.settings import settings
from mirrorstream.models.media import ContentDetails, Episode, Season, StreamDescriptor
from mirrorstream.models.resolution import Empty, Fault, ResolutionResult, Stage, Success
from mirrorstream.services.auth import auth_service
from mirrorstream.services.cinemeta import cinemeta_service
from mirrorstream.services.details import details_service
from mirrorstream.services.episodes import episode_service
from mirrorstream.services.search import search_service
from mirrorstream.utils.helpers import same_number
from mirrorstream.utils.logger import stream_logger
from mirrorstream.utils.matcher import find_best_match
from mirrorstream.utils.providers import build_stream_url
from mirrorstream.utils.validators import extract_media_info, is_external_id


# ===========================
# Stream Service Class
# ===========================
class StreamService:

    def _display_name(self, provider: str) -> str:
        return f"{settings.PROVIDER_TAG}-{provider.upper()}"

    def _find_season(self, details: ContentDetails, season: str) -> Optional[Season]:
        for candidate in details.seasons or []:
            if same_number(candidate.number, season):
                return candidate
        return None

    def _find_episode(self, episodes: List[Episode], episode: str) -> Optional[Episode]:
        for candidate in episodes:
            if same_number(candidate.episode_number, episode):
                return candidate
        return None

    async def resolve(self, provider: str, media_type: str, content_id: str,
                      season: Optional[str] = None, episode: Optional[str] = None) -> ResolutionResult:
        stage: Stage = "metadata"

        try:
            internal_id = content_id
            if is_external_id(content_id):
                stream_logger.info(f"Resolving {content_id} on {provider}")

                meta = await cinemeta_service.get_metadata(media_type, content_id)
                if not meta:
                    stream_logger.info(f"No metadata for {content_id}")
                    return Empty(reason="metadata not found")

                stream_logger.debug(f"Metadata: '{meta.name}' ({meta.year or meta.release_info or 'Unknown'})")

                stage = "search"
                candidates = await search_service.search(provider, meta.name)
                if not candidates:
                    stream_logger.info(f"No {provider} results for '{meta.name}'")
                    return Empty(reason="no search results")

                stage = "match"
                match = find_best_match(meta, candidates)
                if not match:
                    stream_logger.info(f"No match for '{meta.name}' on {provider}")
                    return Empty(reason="no title match")

                stream_logger.info(f"Matched '{meta.name}' to '{match.title}' ({match.id})")
                internal_id = match.id

            stage = "auth"
            cookie_header = await auth_service.get_cookie_header()

            stage = "details"
            details = await details_service.get_details(provider, internal_id, cookie_header)
            if not details:
                stream_logger.info(f"No {provider} details for {internal_id}")
                return Empty(reason="details not found")

            if media_type == "movie":
                return Success(stream=StreamDescriptor(
                    display_name=self._display_name(provider),
                    title=details.title,
                    url=build_stream_url(provider, internal_id)
                ))

            if not season or not episode:
                stream_logger.info(f"Series request without season/episode: {content_id}")
                return Empty(reason="season or episode missing")

            stage = "season"
            target_season = self._find_season(details, season)
            if not target_season:
                stream_logger.info(f"Season {season} not found for '{details.title}'")
                return Empty(reason="season not found")

            stage = "episodes"
            episodes = await episode_service.get_episodes(provider, target_season.id, internal_id, cookie_header)

            stage = "episode"
            target_episode = self._find_episode(episodes, episode)
            if not target_episode:
                stream_logger.info(f"Episode {episode} not found in season {season} of '{details.title}'")
                return Empty(reason="episode not found")

            episode_title = target_episode.title or f"Episode {episode}"
            return Success(stream=StreamDescriptor(
                display_name=self._display_name(provider),
                title=f"{details.title} S{season}E{episode} - {episode_title}",
                url=build_stream_url(provider, target_episode.id)
            ))

        except httpx.HTTPError as e:
            stream_logger.error(f"Resolution fault at {stage} for {content_id}: {type(e).__name__}")
            return Fault(stage=stage, reason=type(e).__name__)

    async def get_streams(self, provider: str, media_type: str, content_id: str) -> List[Dict]:
        media_info = extract_media_info(content_id)

        result = await self.resolve(
            provider,
            media_type,
            media_info["content_id"],
            media_info.get("season"),
            media_info.get("episode")
        )

        if isinstance(result, Success):
            stream_logger.debug(f"Returning stream: {result.stream.title}")
            return [result.stream.to_stremio()]

        if isinstance(result, Fault):
            stream_logger.debug(f"Returning no streams after {result.stage} fault")
        else:
            stream_logger.debug(f"Returning no streams: {result.reason}")
        return []

# ===========================
# Singleton Instance
# ===========================
stream_service = StreamService()
