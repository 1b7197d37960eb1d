"""
Mood module for Moodtunes.

Static mood profiles and the resolver that derives per-request targets.
"""

from .profiles import MoodProfile, MOOD_PROFILES, DEFAULT_PROFILE, SEED_TRACKS, available_moods
from .resolver import MoodResolver

__all__ = [
    'MoodProfile',
    'MOOD_PROFILES',
    'DEFAULT_PROFILE',
    'SEED_TRACKS',
    'available_moods',
    'MoodResolver'
]
