"""
Client-credentials token exchange with the Spotify accounts service.
"""
import logging
from typing import Optional

import requests


SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"


class SpotifyAuthenticator:
    """Exchanges app credentials for a bearer token.

    A fresh token is requested on every call; nothing is cached and failed
    exchanges are not retried.
    """

    def __init__(self,
                 client_id: str,
                 client_secret: str,
                 token_url: str = SPOTIFY_TOKEN_URL,
                 session: Optional[requests.Session] = None):
        self.client_id = client_id
        self.client_secret = client_secret
        self.token_url = token_url
        self.session = session or requests.Session()
        self.logger = logging.getLogger(__name__)

    def fetch_access_token(self) -> Optional[str]:
        """
        Request an access token using the client-credentials grant.

        Returns:
            The access token, or None if the exchange failed for any reason
            (network error, non-2xx status, malformed body).
        """
        try:
            response = self.session.post(
                self.token_url,
                data={"grant_type": "client_credentials"},
                auth=(self.client_id, self.client_secret),
            )
            response.raise_for_status()
            payload = response.json()
        except requests.HTTPError as e:
            self.logger.error(
                f"Error fetching Spotify access token: HTTP {e.response.status_code} {_body_of(e.response)}"
            )
            return None
        except (requests.RequestException, ValueError) as e:
            self.logger.error(f"Error fetching Spotify access token: {e}")
            return None

        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not token:
            self.logger.error("Error fetching Spotify access token: response has no access_token")
            return None

        self.logger.info(
            f"Obtained Spotify access token (type={payload.get('token_type')}, "
            f"expires_in={payload.get('expires_in')})"
        )
        return token


def _body_of(response: Optional[requests.Response]) -> str:
    if response is None:
        return ""
    try:
        return str(response.json())
    except ValueError:
        return response.text
