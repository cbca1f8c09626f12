from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

# ===========================
# Type Aliases
# ===========================
MediaType = Literal["movie", "series"]
ProviderName = Literal["netflix", "prime"]


# ===========================
# Canonical Metadata
# ===========================
class CanonicalMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    media_type: MediaType
    name: str = Field(min_length=1)
    year: Optional[str] = None
    release_info: Optional[str] = None


# ===========================
# Provider Search Candidate
# ===========================
class Candidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    year: Optional[str] = None
    duration: Optional[str] = None
    provider: ProviderName


# ===========================
# Season / Episode Entities
# ===========================
class Season(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    number: str
    episode_count: int = Field(default=0, serialization_alias="episodeCount")


class Episode(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    episode_number: int
    title: Optional[str] = None


# ===========================
# Provider Content Details
# ===========================
class ContentDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    year: str = "Unknown"
    language: str = "Unknown"
    category: Literal["Movie", "Series"] = "Movie"
    genre: str = "Unknown"
    cast: str = "Unknown"
    description: str = "No description available"
    rating: str = "Not rated"
    match: str = "N/A"
    runtime: str = "Unknown"
    quality: str = "Unknown"
    creator: Optional[str] = None
    director: Optional[str] = None
    seasons: Optional[List[Season]] = None
    content_warning: Optional[str] = Field(default=None, serialization_alias="contentWarning")


# ===========================
# Stream Descriptor
# ===========================
class StreamDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    display_name: str = Field(serialization_alias="name")
    title: str
    url: str

    def to_stremio(self) -> dict:
        return self.model_dump(by_alias=True)
