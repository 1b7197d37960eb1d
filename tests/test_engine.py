import json
import logging

import pytest

from moodtunes.recommendation.engine import MoodRecommendationEngine
from moodtunes.recommendation.errors import CredentialFailure, UpstreamFailure
from moodtunes.recommendation.schemas import TrackSummary
from moodtunes.utils.logging import ROOT_LOGGER_NAME, configure_logging


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.propagate = True


class StubAuthenticator:
    def __init__(self, token="abc123"):
        self.token = token
        self.calls = 0

    def fetch_access_token(self):
        self.calls += 1
        return self.token


class StubClient:
    def __init__(self, tracks=None, error=None):
        self.tracks = tracks or []
        self.error = error
        self.requests = []

    def get_recommendations(self, access_token, request):
        self.requests.append((access_token, request))
        if self.error:
            raise self.error
        return self.tracks


def summary(i):
    return TrackSummary(
        name=f"Song {i}",
        artist=f"Artist {i}",
        album=f"Album {i}",
        external_url=f"https://open.spotify.com/track/{i}"
    )


def test_recommend_passes_token_and_resolved_request(resolver):
    client = StubClient(tracks=[summary(1), summary(2)])
    engine = MoodRecommendationEngine(StubAuthenticator(), client, resolver)

    tracks = engine.recommend("Classical")

    assert [t.name for t in tracks] == ["Song 1", "Song 2"]
    token, request = client.requests[0]
    assert token == "abc123"
    assert request.mood == "classical"
    assert request.seed_genre == "classical"
    assert request.target_acousticness is not None


def test_credential_failure_skips_upstream_call(resolver):
    auth = StubAuthenticator(token=None)
    client = StubClient(tracks=[summary(1)])
    engine = MoodRecommendationEngine(auth, client, resolver)

    with pytest.raises(CredentialFailure) as exc_info:
        engine.recommend("happy")

    assert exc_info.value.message == "Unable to get Spotify access token"
    assert client.requests == []


def test_upstream_failure_propagates(resolver):
    client = StubClient(error=UpstreamFailure("boom"))
    engine = MoodRecommendationEngine(StubAuthenticator(), client, resolver)
    with pytest.raises(UpstreamFailure):
        engine.recommend("rock")


def test_each_call_fetches_a_new_token(resolver):
    auth = StubAuthenticator()
    engine = MoodRecommendationEngine(auth, StubClient(), resolver)
    engine.recommend("sad")
    engine.recommend("sad")
    assert auth.calls == 2


def test_recommend_logs_completed_operation(resolver, capsys):
    configure_logging("INFO", "json")
    engine = MoodRecommendationEngine(StubAuthenticator(), StubClient(tracks=[summary(1)]), resolver)

    engine.recommend("jazz")

    lines = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]
    assert lines[0]["track_count"] == 1
    assert lines[0]["seed_genre"] == "jazz"
    assert lines[-1]["operation_status"] == "completed"
    assert lines[-1]["context"]["component"] == "MoodRecommendationEngine"
    assert lines[-1]["context"]["metadata"] == {"mood": "jazz"}


def test_credential_failure_logs_failed_operation(resolver, capsys):
    configure_logging("INFO", "json")
    engine = MoodRecommendationEngine(StubAuthenticator(token=None), StubClient(), resolver)

    with pytest.raises(CredentialFailure):
        engine.recommend("happy")

    failure = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert failure["operation_status"] == "failed"
    assert failure["error_type"] == "CredentialFailure"
