import time
from enum import Enum
from typing import Optional

from fastapi import APIRouter, Path, Query
from fastapi.responses import JSONResponse, RedirectResponse

from mirrorstream.config.settings import settings
from mirrorstream.services.auth import auth_service
from mirrorstream.services.details import details_service
from mirrorstream.services.search import search_service
from mirrorstream.services.stream import stream_service
from mirrorstream.utils.http_client import http_client
from mirrorstream.utils.logger import api_logger
from mirrorstream.utils.providers import build_hls_url, normalize_provider


# ===========================
# Router Instance
# ===========================
router = APIRouter()


# ===========================
# Content Type Enum
# ===========================
class ContentType(str, Enum):
    movie = "movie"
    series = "series"


CONTENT_TYPES = {content_type.value for content_type in ContentType}


# ===========================
# Stremio Addon Endpoints
# ===========================
@router.get("/manifest.json", summary="Stremio Manifest", description="Returns addon metadata for installation")
async def get_manifest():
    return JSONResponse(content=settings.ADDON_MANIFEST)


@router.get("/{provider}/manifest.json", summary="Provider Manifest", description="Returns addon metadata bound to one provider")
async def get_provider_manifest(
    provider: str = Path(..., description="Provider name")
):
    provider_name = normalize_provider(provider)
    if not provider_name:
        return JSONResponse(status_code=400, content={"error": "Unsupported provider"})

    manifest = settings.ADDON_MANIFEST.copy()
    manifest["id"] = f"{settings.ADDON_ID}.{provider_name}"
    manifest["name"] = f"{settings.ADDON_NAME} | {provider_name.upper()}"

    return JSONResponse(content=manifest)


@router.get("/{provider}/stream/{content_type}/{content_id}",
            summary="Get streams",
            description="Returns the stream for the requested content on one provider")
async def get_streams(
    provider: str = Path(..., description="Provider name"),
    content_type: str = Path(..., description="Content type"),
    content_id: str = Path(..., description="Content identifier")
):
    provider_name = normalize_provider(provider)
    content_id_formatted = content_id.replace(".json", "").strip()

    if not provider_name or content_type not in CONTENT_TYPES or not content_id_formatted:
        api_logger.debug(f"Invalid stream request: {provider}/{content_type}/{content_id}")
        return JSONResponse(status_code=400, content={"streams": []})

    api_logger.debug(f"Stream: {provider_name}/{content_type}/{content_id_formatted}")

    try:
        streams = await stream_service.get_streams(
            provider=provider_name,
            media_type=content_type,
            content_id=content_id_formatted
        )

        return JSONResponse(content={"streams": streams})

    except Exception as e:
        api_logger.error(f"Stream failed: {type(e).__name__}")
        return JSONResponse(status_code=500, content={"streams": []})


# ===========================
# Search Endpoints
# ===========================
@router.get("/search",
            summary="Unified search",
            description="Searches every provider concurrently and merges the results")
async def unified_search(
    q: str = Query("", description="Search query")
):
    if not q.strip():
        return JSONResponse(status_code=400, content={"error": "Please enter a search query", "results": []})

    results = await search_service.search_all(q.strip())

    return JSONResponse(content={
        "results": [result.model_dump(exclude_none=True) for result in results]
    })


@router.get("/details/{provider}",
            summary="Provider details",
            description="Returns provider-side details for a provider-native id")
async def get_details(
    provider: str = Path(..., description="Provider name"),
    id: Optional[str] = Query(None, description="Provider content id")
):
    provider_name = normalize_provider(provider)
    if not provider_name:
        return JSONResponse(status_code=400, content={"error": "Unsupported provider"})

    if not id or not id.strip():
        return JSONResponse(status_code=400, content={"error": "Missing or invalid ID"})

    try:
        cookie_header = await auth_service.get_cookie_header()
        details = await details_service.get_details(provider_name, id.strip(), cookie_header)

        if not details:
            return JSONResponse(status_code=404, content={"error": f"Content not found on {provider_name}"})

        return JSONResponse(content=details.model_dump(by_alias=True, exclude_none=True))

    except Exception as e:
        api_logger.error(f"Details failed: {type(e).__name__}")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch data. Please try again."})


# ===========================
# Direct Stream Endpoint
# ===========================
@router.get("/direct",
            summary="Direct stream",
            description="Redirects to the provider HLS playlist for a provider-native id")
async def direct_stream(
    service: Optional[str] = Query(None, description="Provider name"),
    id: Optional[str] = Query(None, description="Provider content id")
):
    if not service or not id:
        return JSONResponse(status_code=400, content={"error": "Missing service or id"})

    provider_name = normalize_provider(service)
    if not provider_name:
        return JSONResponse(status_code=400, content={"error": "Unsupported service"})

    token = await auth_service.get_stream_token()
    if not token:
        return JSONResponse(status_code=500, content={"error": "Failed to get token"})

    return RedirectResponse(f"{build_hls_url(provider_name, id)}?{token}")


# ===========================
# Health Check Endpoint
# ===========================
async def _check_upstream(name: str, url: str) -> dict:
    start = time.time()
    try:
        response = await http_client.get(url, timeout=settings.HEALTH_CHECK_TIMEOUT)
        elapsed = round((time.time() - start) * 1000)

        if response.status_code < 500:
            return {"status": "ok", "message": f"{name} accessible", "response_time_ms": elapsed}

        return {"status": "error", "message": f"{name} HTTP {response.status_code}", "response_time_ms": elapsed}

    except Exception as e:
        elapsed = round((time.time() - start) * 1000)
        return {"status": "error", "message": f"{name} unreachable: {str(e)}", "response_time_ms": elapsed}


@router.get("/health",
            summary="Health check",
            description="Returns the current health status of the service")
async def health_check():
    start_time = time.time()
    health_status = {
        "status": "healthy",
        "version": settings.ADDON_VERSION,
        "timestamp": int(time.time()),
        "checks": {}
    }

    health_status["checks"]["server"] = {
        "status": "ok",
        "message": "Addon server running"
    }

    health_status["checks"]["cinemeta"] = await _check_upstream("Cinemeta", settings.CINEMETA_URL)
    health_status["checks"]["provider"] = await _check_upstream("Provider API", settings.PROVIDER_API_URL)

    if any(check["status"] == "error" for check in health_status["checks"].values()):
        health_status["status"] = "degraded"

    health_status["total_response_time_ms"] = round((time.time() - start_time) * 1000)

    return health_status
