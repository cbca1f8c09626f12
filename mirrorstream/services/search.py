import asyncio
from typing import List

import httpx

from mirrorstream.models.media import Candidate
from mirrorstream.utils.helpers import first_field
from mirrorstream.utils.http_client import http_client
from mirrorstream.utils.logger import search_logger
from mirrorstream.utils.providers import SUPPORTED_PROVIDERS, provider_headers, search_url

# ===========================
# Search Result Fields
# ===========================
ID_FIELDS = ("id",)
TITLE_FIELDS = ("t", "title")
YEAR_FIELDS = ("y", "year")
DURATION_FIELDS = ("r",)


# ===========================
# Search Service Class
# ===========================
class SearchService:

    async def search(self, provider: str, query: str) -> List[Candidate]:
        if provider not in SUPPORTED_PROVIDERS:
            search_logger.error(f"Unsupported provider: {provider}")
            return []

        if not query or not query.strip():
            return []

        search_logger.debug(f"Searching {provider}: '{query}'")

        try:
            response = await http_client.get(
                search_url(provider),
                params={"s": query.strip()},
                headers=provider_headers()
            )

            if response.status_code != 200:
                search_logger.error(f"{provider} search HTTP {response.status_code}")
                return []

            data = response.json()
            items = data.get("searchResult") if isinstance(data, dict) else None

            if not isinstance(items, list):
                search_logger.debug(f"No {provider} results for '{query}'")
                return []

            candidates = []
            for item in items:
                if not isinstance(item, dict):
                    continue

                item_id = first_field(item, ID_FIELDS)
                title = first_field(item, TITLE_FIELDS)
                if item_id is None or not title:
                    continue

                year = first_field(item, YEAR_FIELDS)
                duration = first_field(item, DURATION_FIELDS)
                candidates.append(Candidate(
                    id=str(item_id),
                    title=str(title),
                    year=str(year) if year is not None else None,
                    duration=str(duration) if duration is not None else None,
                    provider=provider
                ))

            search_logger.debug(f"{provider}: {len(candidates)} results for '{query}'")
            return candidates

        except (httpx.HTTPError, ValueError) as e:
            search_logger.error(f"{provider} search error: {type(e).__name__}")
            return []

    async def search_all(self, query: str) -> List[Candidate]:
        tasks = [self.search(provider, query) for provider in SUPPORTED_PROVIDERS]
        all_results = await asyncio.gather(*tasks, return_exceptions=True)

        merged_results = []
        for idx, results in enumerate(all_results):
            if isinstance(results, list):
                merged_results.extend(results)
            elif isinstance(results, Exception):
                search_logger.error(f"Search failed for {SUPPORTED_PROVIDERS[idx]}: {type(results).__name__}")

        search_logger.debug(f"Unified search '{query}': {len(merged_results)} results")
        return merged_results

# ===========================
# Singleton Instance
# ===========================
search_service = SearchService()
