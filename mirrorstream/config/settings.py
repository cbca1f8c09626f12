from typing import Optional, Dict, Any
from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )

    # ===========================
    # Addon Customization
    # ===========================
    ADDON_ID: Optional[str] = "community.mirrorstream"
    ADDON_NAME: Optional[str] = "MirrorStream"
    ADDON_VERSION: str = "1.0.0"
    PROVIDER_TAG: str = "IOSMIRROR"

    # ===========================
    # Server Configuration
    # ===========================
    PORT: Optional[int] = 7000

    # ===========================
    # Metadata Configuration
    # ===========================
    CINEMETA_URL: str = "https://v3-cinemeta.strem.io"

    # ===========================
    # Provider Configuration
    # ===========================
    PROVIDER_API_URL: str = "https://net20.cc"
    PROVIDER_EPISODE_API_URL: str = "https://net51.cc"
    PROVIDER_HLS_URL: str = "https://net51.cc"
    PROVIDER_REFERER: str = "https://net51.cc/"
    PROVIDER_USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    STREAM_PROXY_URL: str = "https://fetch.vflix.life/api/proxy"

    # ===========================
    # Credentials Configuration
    # ===========================
    PROVIDER_COOKIE: Optional[str] = None
    PROVIDER_STREAM_TOKEN: Optional[str] = None

    # ===========================
    # Title Matching Configuration
    # ===========================
    MATCH_YEAR_TOLERANCE: int = 1
    MATCH_MAX_LENGTH_DIFF: int = 5
    MATCH_FUZZY_MIN_LENGTH: int = 4

    # ===========================
    # HTTP Timeout Configuration
    # ===========================
    HTTP_TIMEOUT: Optional[int] = 15
    METADATA_TIMEOUT: Optional[int] = 10
    HEALTH_CHECK_TIMEOUT: Optional[int] = 5

    # ===========================
    # Proxy Configuration
    # ===========================
    PROXY_URL: Optional[str] = None

    # ===========================
    # Logging Configuration
    # ===========================
    LOG_LEVEL: Optional[str] = "DEBUG"

    # ===========================
    # Field Validators
    # ===========================
    @field_validator("CINEMETA_URL", "PROVIDER_API_URL", "PROVIDER_EPISODE_API_URL",
                     "PROVIDER_HLS_URL", "STREAM_PROXY_URL", "PROXY_URL")
    @classmethod
    def normalize_urls(cls, v):
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.upper()
        return v

    # ===========================
    # Computed Properties
    # ===========================
    @computed_field
    @property
    def ADDON_MANIFEST(self) -> Dict[str, Any]:
        return {
            "id": self.ADDON_ID,
            "name": self.ADDON_NAME,
            "version": self.ADDON_VERSION,
            "description": "Stremio addon resolving IMDb titles to Netflix and Prime mirror streams",
            "catalogs": [],
            "resources": ["stream"],
            "types": ["movie", "series"],
            "idPrefixes": ["tt"],
            "behaviorHints": {
                "configurable": False
            }
        }


# ===========================
# Settings Instance
# ===========================
settings = Settings()
