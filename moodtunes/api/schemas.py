"""
Pydantic schemas for the Moodtunes REST API.
"""
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from ..recommendation.schemas import TrackSummary


class TrackSummaryResponse(BaseModel):
    """Single recommended track, serialized with camelCase keys."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Track name")
    artist: str = Field(description="Name of the first credited artist")
    album: str = Field(description="Album name")
    album_cover: Optional[str] = Field(
        default=None,
        alias="albumCover",
        description="URL of the largest album image"
    )
    spotify_url: str = Field(
        alias="spotifyUrl",
        description="Link to the track on Spotify"
    )
    preview_url: Optional[str] = Field(
        default=None,
        alias="previewUrl",
        description="30 second preview clip, when Spotify provides one"
    )

    @classmethod
    def from_summary(cls, summary: TrackSummary) -> "TrackSummaryResponse":
        return cls(
            name=summary.name,
            artist=summary.artist,
            album=summary.album,
            album_cover=summary.album_cover_url,
            spotify_url=summary.external_url,
            preview_url=summary.preview_url
        )


class MoodsResponse(BaseModel):
    """Moods accepted by the recommendation endpoint."""
    moods: List[str] = Field(description="Known mood labels in menu order")
    default_genre: str = Field(description="Seed genre used for unknown moods")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(description="API status")
    version: str = Field(description="API version")
    credentials_configured: bool = Field(description="Whether Spotify credentials are set")
