import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

import requests
from django.conf import settings
from django.utils import timezone

logger = logging.getLogger(__name__)

GOOGLE_TOKEN_URI = getattr(settings, 'GOOGLE_SHOPPING_TOKEN_URI', 'https://oauth2.googleapis.com/token')


class TokenRefreshError(Exception):
    """The token endpoint refused to issue a new access token."""


@dataclass(frozen=True)
class TokenMaterial:
    access_token: str
    expires_in: Optional[int] = None
    refresh_token: Optional[str] = None
    token_type: str = 'Bearer'

    @property
    def expires_at(self):
        if self.expires_in is None:
            return None
        return timezone.now() + timedelta(seconds=self.expires_in)


class AuthSession:
    """OAuth2 credentials shared by every call made through a transport.

    ``refresh`` mutates the session in place; persisting the returned
    ``TokenMaterial`` is left to the caller.
    """

    def __init__(self, client_id, client_secret, access_token=None, refresh_token=None,
                 token_uri=GOOGLE_TOKEN_URI, http=None, timeout=30):
        self.client_id = client_id
        self.client_secret = client_secret
        self.access_token = access_token
        self.refresh_token = refresh_token
        self.token_uri = token_uri
        self.http = http or requests.Session()
        self.timeout = timeout

    @classmethod
    def from_settings(cls, shopping_settings):
        return cls(
            client_id=shopping_settings.client_id,
            client_secret=shopping_settings.client_secret,
            access_token=shopping_settings.access_token or None,
            refresh_token=shopping_settings.refresh_token or None,
            timeout=getattr(settings, 'GOOGLE_SHOPPING_API_TIMEOUT', 30),
        )

    @property
    def has_refresh_token(self) -> bool:
        return bool(self.refresh_token)

    def authorization_header(self) -> dict:
        if not self.access_token:
            return {}
        return {'Authorization': f"Bearer {self.access_token}"}

    def refresh(self) -> TokenMaterial:
        if not self.has_refresh_token:
            raise TokenRefreshError("no refresh token available")

        response = self.http.post(
            self.token_uri,
            data={
                'grant_type': 'refresh_token',
                'refresh_token': self.refresh_token,
                'client_id': self.client_id,
                'client_secret': self.client_secret,
            },
            timeout=self.timeout,
        )
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if not response.ok or not body.get('access_token'):
            reason = body.get('error_description') or body.get('error') or response.reason
            raise TokenRefreshError(f"token refresh failed ({response.status_code}): {reason}")

        token = TokenMaterial(
            access_token=body['access_token'],
            expires_in=body.get('expires_in'),
            refresh_token=body.get('refresh_token'),
            token_type=body.get('token_type', 'Bearer'),
        )
        self.access_token = token.access_token
        if token.refresh_token:
            self.refresh_token = token.refresh_token
        logger.debug("Obtained new access token from %s", self.token_uri)
        return token
