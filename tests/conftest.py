import random

import pytest
import requests

from moodtunes.moods.resolver import MoodResolver


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Stands in for requests.Session; replays canned responses per method."""

    def __init__(self, post=None, get=None):
        self._responses = {"post": post, "get": get}
        self.calls = []

    def _request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        result = self._responses[method]
        if isinstance(result, Exception):
            raise result
        if result is None:
            raise AssertionError(f"unexpected {method.upper()} {url}")
        return result

    def post(self, url, **kwargs):
        return self._request("post", url, **kwargs)

    def get(self, url, **kwargs):
        return self._request("get", url, **kwargs)

    def calls_for(self, method):
        return [call for call in self.calls if call[0] == method]


def make_spotify_track(index=1, with_image=True, preview=True):
    return {
        "id": f"track{index}",
        "name": f"Song {index}",
        "popularity": 50 + index,
        "duration_ms": 200000,
        "uri": f"spotify:track:track{index}",
        "artists": [
            {"name": f"Artist {index}", "id": f"artist{index}"},
            {"name": "Featured Artist", "id": "feat"},
        ],
        "album": {
            "name": f"Album {index}",
            "release_date": "2020-01-01",
            "images": [
                {"url": f"https://img.example/{index}/640.jpg", "height": 640},
                {"url": f"https://img.example/{index}/300.jpg", "height": 300},
            ] if with_image else [],
        },
        "external_urls": {"spotify": f"https://open.spotify.com/track/track{index}"},
        "preview_url": f"https://p.scdn.co/mp3-preview/{index}" if preview else None,
    }


@pytest.fixture
def spotify_track():
    return make_spotify_track


@pytest.fixture
def token_response():
    return FakeResponse(200, {"access_token": "abc123", "token_type": "Bearer", "expires_in": 3600})


@pytest.fixture
def resolver():
    return MoodResolver(rng=random.Random(42))
