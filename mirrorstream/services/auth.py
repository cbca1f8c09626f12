from typing import Optional

from mirrorstream.config.settings import settings
from mirrorstream.utils.logger import auth_logger

# ===========================
# Auth Service Class
# ===========================
class AuthService:

    async def get_cookie_header(self) -> Optional[str]:
        cookie = (settings.PROVIDER_COOKIE or "").strip()
        if not cookie:
            auth_logger.debug("No provider cookie configured")
            return None
        return cookie

    async def get_stream_token(self) -> Optional[str]:
        token = (settings.PROVIDER_STREAM_TOKEN or "").strip()
        if not token:
            auth_logger.error("No stream token configured")
            return None
        return token.lstrip("?")

# ===========================
# Singleton Instance
# ===========================
auth_service = AuthService()
