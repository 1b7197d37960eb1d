"""
Mood profiles for Moodtunes.

Each mood maps to a Spotify seed genre and target audio features that steer
the recommendations endpoint:

- valence: musical positivity (0.0 = sad, 1.0 = happy)
- energy: intensity and activity (0.0 = calm, 1.0 = energetic)
- acousticness: acoustic vs electronic sound, only set for some moods
"""
from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class MoodProfile:
    """Static audio-feature profile for a mood label."""
    mood_name: str
    seed_genre: str
    valence: float
    energy: float
    acousticness: Optional[float] = None


MOOD_PROFILES: Dict[str, MoodProfile] = {
    profile.mood_name: profile
    for profile in (
        MoodProfile('happy', 'pop', 0.8, 0.7),
        MoodProfile('chill', 'chill', 0.5, 0.4),
        MoodProfile('party', 'dance', 0.9, 0.9),
        MoodProfile('ambient', 'ambient', 0.4, 0.3),
        MoodProfile('classical', 'classical', 0.5, 0.2, acousticness=0.9),
        MoodProfile('jazz', 'jazz', 0.6, 0.5, acousticness=0.7),
        MoodProfile('hip-hop', 'hip-hop', 0.7, 0.8),
        MoodProfile('pop', 'pop', 0.7, 0.8),
        MoodProfile('rock', 'rock', 0.6, 0.8),
        MoodProfile('blues', 'blues', 0.4, 0.5, acousticness=0.8),
        MoodProfile('soft', 'acoustic', 0.6, 0.3, acousticness=0.8),
        MoodProfile('sad', 'sad', 0.2, 0.3, acousticness=0.6),
        MoodProfile('heartbreak', 'soul', 0.3, 0.4, acousticness=0.5),
        MoodProfile('empty', 'blues', 0.1, 0.2, acousticness=0.7),
    )
}

# Used for any mood missing from MOOD_PROFILES.
DEFAULT_PROFILE = MoodProfile(mood_name='default', seed_genre='pop', valence=0.5, energy=0.5)

SEED_TRACKS = (
    '4NHQUGzhtTLFvgF5SZesLK',
    '6rqhFgbbKwnb9MLmUQDhG6',
    '3n3Ppam7vgaVa1iaRUc9Lp',
)


def available_moods() -> List[str]:
    """Mood names in menu order."""
    return list(MOOD_PROFILES)
