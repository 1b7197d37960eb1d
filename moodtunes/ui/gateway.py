"""
HTTP access to the Moodtunes API for the presentation layer.
"""
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests


class HttpRecommendationsGateway:
    """Calls ``GET /recommend/mood/{mood}`` on a running Moodtunes API."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()

    def fetch(self, mood: str) -> List[Dict[str, Any]]:
        """
        Fetch recommendations for ``mood``.

        Returns:
            Decoded JSON list of track dicts

        Raises:
            requests.RequestException: On network errors and non-2xx answers
        """
        response = self.session.get(f"{self.base_url}/recommend/mood/{quote(mood, safe='')}")
        response.raise_for_status()
        return response.json()
