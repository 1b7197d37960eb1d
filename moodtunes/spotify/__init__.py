"""
Spotify Web API access for Moodtunes.
"""

from .auth import SpotifyAuthenticator, SPOTIFY_TOKEN_URL
from .client import SpotifyRecommendationsClient, SPOTIFY_API_BASE_URL

__all__ = [
    'SpotifyAuthenticator',
    'SpotifyRecommendationsClient',
    'SPOTIFY_TOKEN_URL',
    'SPOTIFY_API_BASE_URL'
]
