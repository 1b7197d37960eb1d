"""
Failure kinds surfaced by the recommendation flow.

Both are reported to HTTP callers as a 500 with a fixed plain-text message;
the underlying cause is only logged.
"""


class RecommendationError(Exception):
    """Base class for failures of a mood recommendation request."""
    message = "Error fetching recommendations"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail


class CredentialFailure(RecommendationError):
    """The client-credentials token exchange did not yield a token."""
    message = "Unable to get Spotify access token"


class UpstreamFailure(RecommendationError):
    """The recommendations call failed or returned an unusable body."""
    message = "Error fetching recommendations"
