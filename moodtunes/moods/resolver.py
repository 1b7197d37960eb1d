"""
Mood resolution for Moodtunes.

Turns a mood label into a RecommendationRequest: static profile lookup,
bounded random jitter on the target features and a random seed track.
"""
import logging
import random
from typing import Optional, Sequence

from .profiles import MoodProfile, MOOD_PROFILES, DEFAULT_PROFILE, SEED_TRACKS
from ..recommendation.schemas import RecommendationRequest


class MoodResolver:
    """Derives per-request target features for a mood.

    Jitter is applied independently to valence, energy and (when the profile
    defines it) acousticness. Results are intentionally not clamped to [0, 1];
    e.g. "party" (valence 0.9) can yield a target_valence of up to 1.0 and
    "empty" (valence 0.1) can go down to 0.0, and with a larger configured
    jitter values can leave the range entirely.
    """

    def __init__(self,
                 jitter: float = 0.1,
                 limit: int = 10,
                 seed_tracks: Sequence[str] = SEED_TRACKS,
                 rng: Optional[random.Random] = None):
        if jitter < 0:
            raise ValueError("Jitter cannot be negative")
        if not seed_tracks:
            raise ValueError("At least one seed track is required")
        self.jitter = jitter
        self.limit = limit
        self.seed_tracks = tuple(seed_tracks)
        self.rng = rng or random.Random()
        self.logger = logging.getLogger(__name__)

    def lookup(self, mood: str) -> MoodProfile:
        """Return the profile for ``mood`` (case-insensitive) or the default one."""
        profile = MOOD_PROFILES.get(mood.lower())
        if profile is None:
            self.logger.info(f"Unknown mood '{mood}', using default profile")
            return DEFAULT_PROFILE
        return profile

    def perturb(self, value: float) -> float:
        return value + self.rng.uniform(-self.jitter, self.jitter)

    def pick_seed_track(self) -> str:
        return self.rng.choice(self.seed_tracks)

    def resolve(self, mood: str) -> RecommendationRequest:
        """Build the upstream query for ``mood``.

        Args:
            mood: Mood label as received from the caller

        Returns:
            RecommendationRequest with jittered targets and a seed track
        """
        profile = self.lookup(mood)
        acousticness = None
        if profile.acousticness is not None:
            acousticness = self.perturb(profile.acousticness)

        request = RecommendationRequest(
            mood=mood.lower(),
            seed_genre=profile.seed_genre,
            seed_track_id=self.pick_seed_track(),
            target_valence=self.perturb(profile.valence),
            target_energy=self.perturb(profile.energy),
            target_acousticness=acousticness,
            limit=self.limit
        )
        self.logger.debug(f"Resolved mood '{request.mood}' to {request.to_query_params()}")
        return request
