"""
Recommendation schemas for Moodtunes.
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any, Union


@dataclass
class RecommendationRequest:
    """Derived query for one mood, created per request and then discarded.

    Target values are jittered around the mood baseline and are not clamped,
    so they may fall slightly outside [0, 1].
    """
    mood: str
    seed_genre: str
    seed_track_id: str
    target_valence: float
    target_energy: float
    target_acousticness: Optional[float] = None
    limit: int = 10

    def __post_init__(self):
        if self.limit <= 0:
            raise ValueError("Limit must be positive")

    def to_query_params(self) -> Dict[str, Union[str, int, float]]:
        """Query parameters for the Spotify recommendations endpoint."""
        params: Dict[str, Union[str, int, float]] = {
            "seed_genres": self.seed_genre,
            "seed_tracks": self.seed_track_id,
            "limit": self.limit,
            "target_valence": self.target_valence,
            "target_energy": self.target_energy,
        }
        if self.target_acousticness is not None:
            params["target_acousticness"] = self.target_acousticness
        return params


@dataclass
class TrackSummary:
    """Reduced view of a Spotify track."""
    name: str
    artist: str
    album: str
    external_url: str
    album_cover_url: Optional[str] = None
    preview_url: Optional[str] = None

    @classmethod
    def from_spotify_track(cls, track: Dict[str, Any]) -> 'TrackSummary':
        """
        Project a Spotify track object onto the fields we expose.

        Only the first artist and the first (largest) album image are kept.

        Args:
            track: Track object as returned by the Spotify Web API

        Returns:
            TrackSummary instance

        Raises:
            KeyError: If a required field is missing
            IndexError: If the track lists no artists
            ValueError: If a required field is null or not a string
            TypeError, AttributeError: If the track or its album is not a mapping
        """
        album = track["album"]
        images = album.get("images") or []
        required = {
            "name": track["name"],
            "artist": track["artists"][0]["name"],
            "album": album["name"],
            "external_url": track["external_urls"]["spotify"],
        }
        for field_name, value in required.items():
            if not isinstance(value, str):
                raise ValueError(f"Track field '{field_name}' must be a string, got {value!r}")
        optional = {
            "album_cover_url": images[0].get("url") if images else None,
            "preview_url": track.get("preview_url"),
        }
        for field_name, value in optional.items():
            if value is not None and not isinstance(value, str):
                raise ValueError(f"Track field '{field_name}' must be a string or null, got {value!r}")
        return cls(**required, **optional)
