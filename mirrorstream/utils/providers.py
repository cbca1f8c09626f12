from typing import Dict, List, Optional

from mirrorstream.config.settings import settings
from mirrorstream.utils.helpers import quote_url_param

# ===========================
# Provider Endpoints
# ===========================
PROVIDER_PATHS: Dict[str, Dict[str, str]] = {
    "netflix": {
        "search": "/search.php",
        "details": "/post.php",
        "episodes": "/episodes.php",
        "hls": "/hls",
    },
    "prime": {
        "search": "/pv/search.php",
        "details": "/pv/post.php",
        "episodes": "/tv/pv/episodes.php",
        "hls": "/pv/hls",
    },
}

SUPPORTED_PROVIDERS: List[str] = list(PROVIDER_PATHS)

PROVIDER_ALIASES: Dict[str, str] = {
    "netflix": "netflix",
    "prime": "prime",
    "amazon-prime": "prime",
}


# ===========================
# Provider Name Resolution
# ===========================
def normalize_provider(name: Optional[str]) -> Optional[str]:
    if not name:
        return None
    return PROVIDER_ALIASES.get(name.strip().lower())


# ===========================
# Endpoint Builders
# ===========================
def search_url(provider: str) -> str:
    return f"{settings.PROVIDER_API_URL}{PROVIDER_PATHS[provider]['search']}"


def details_url(provider: str) -> str:
    return f"{settings.PROVIDER_API_URL}{PROVIDER_PATHS[provider]['details']}"


def episodes_url(provider: str) -> str:
    return f"{settings.PROVIDER_EPISODE_API_URL}{PROVIDER_PATHS[provider]['episodes']}"


def build_stream_url(provider: str, content_id: str) -> str:
    return f"{settings.STREAM_PROXY_URL}?service={provider}&id={quote_url_param(str(content_id))}"


def build_hls_url(provider: str, content_id: str) -> str:
    return f"{settings.PROVIDER_HLS_URL}{PROVIDER_PATHS[provider]['hls']}/{quote_url_param(str(content_id))}.m3u8"


# ===========================
# Request Headers
# ===========================
def provider_headers(cookie_header: Optional[str] = None) -> Dict[str, str]:
    headers = {
        "User-Agent": settings.PROVIDER_USER_AGENT,
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
        "Referer": settings.PROVIDER_REFERER,
    }
    if cookie_header:
        headers["Cookie"] = cookie_header
    return headers
