import random

import pytest

from moodtunes.moods.profiles import MOOD_PROFILES, DEFAULT_PROFILE, SEED_TRACKS, available_moods
from moodtunes.moods.resolver import MoodResolver


EXPECTED_GENRES = {
    "happy": "pop",
    "chill": "chill",
    "party": "dance",
    "ambient": "ambient",
    "classical": "classical",
    "jazz": "jazz",
    "hip-hop": "hip-hop",
    "pop": "pop",
    "rock": "rock",
    "blues": "blues",
    "soft": "acoustic",
    "sad": "sad",
    "heartbreak": "soul",
    "empty": "blues",
}


class MaxRandom(random.Random):
    """Always returns the top of the jitter range and the first seed track."""

    def uniform(self, a, b):
        return b

    def choice(self, seq):
        return seq[0]


class MinRandom(MaxRandom):
    def uniform(self, a, b):
        return a


def test_profile_table_has_fourteen_moods():
    assert len(MOOD_PROFILES) == 14
    assert available_moods() == list(EXPECTED_GENRES)


@pytest.mark.parametrize("mood,genre", sorted(EXPECTED_GENRES.items()))
def test_known_mood_resolves_to_its_genre(resolver, mood, genre):
    assert resolver.lookup(mood).seed_genre == genre
    assert resolver.resolve(mood).seed_genre == genre


def test_lookup_is_case_insensitive(resolver):
    assert resolver.lookup("HIP-HOP") is MOOD_PROFILES["hip-hop"]
    assert resolver.resolve("Jazz").mood == "jazz"


@pytest.mark.parametrize("mood", ["melancholy", "", "happy ", "unknown-mood"])
def test_unknown_mood_falls_back_to_pop(resolver, mood):
    assert resolver.lookup(mood) is DEFAULT_PROFILE
    request = resolver.resolve(mood)
    assert request.seed_genre == "pop"
    assert request.target_acousticness is None


def test_jitter_stays_within_a_tenth_of_baseline():
    resolver = MoodResolver(rng=random.Random(7))
    for _ in range(500):
        for mood, profile in MOOD_PROFILES.items():
            request = resolver.resolve(mood)
            assert profile.valence - 0.1 <= request.target_valence <= profile.valence + 0.1
            assert profile.energy - 0.1 <= request.target_energy <= profile.energy + 0.1
            if profile.acousticness is None:
                assert request.target_acousticness is None
            else:
                assert profile.acousticness - 0.1 <= request.target_acousticness <= profile.acousticness + 0.1


def test_default_profile_jitter_around_half():
    resolver = MoodResolver(rng=random.Random(3))
    for _ in range(200):
        request = resolver.resolve("no-such-mood")
        assert 0.4 <= request.target_valence <= 0.6
        assert 0.4 <= request.target_energy <= 0.6


def test_jitter_is_not_clamped():
    resolver = MoodResolver(jitter=0.2, rng=MaxRandom())
    request = resolver.resolve("party")
    assert request.target_valence == pytest.approx(1.1)
    assert request.target_energy == pytest.approx(1.1)
    assert request.target_valence > 1.0


def test_jitter_can_go_below_zero():
    resolver = MoodResolver(jitter=0.2, rng=MinRandom())
    request = resolver.resolve("empty")
    assert request.target_valence == pytest.approx(-0.1)
    assert request.target_energy == pytest.approx(0.0)
    assert request.target_valence < 0.0


def test_seed_track_is_one_of_the_fixed_ids():
    resolver = MoodResolver(rng=random.Random(11))
    seen = {resolver.resolve("chill").seed_track_id for _ in range(300)}
    assert seen <= set(SEED_TRACKS)
    assert seen == set(SEED_TRACKS)


def test_limit_is_ten_by_default(resolver):
    assert resolver.resolve("rock").limit == 10


def test_invalid_resolver_settings():
    with pytest.raises(ValueError):
        MoodResolver(jitter=-0.1)
    with pytest.raises(ValueError):
        MoodResolver(seed_tracks=[])
