"""
GitHub OAuth 2.0 Authorization Code Flow.

Handles:
- Authorization requests (redirect to GitHub with a one-time state value)
- Callbacks (exchange the code for an access token, fetch the profile)

Tokens are only used to read the profile once; the session stores the
GitHub identity, never the token.
"""

import asyncio
import logging
import secrets
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from .config import GitHubOAuthConfig

log = logging.getLogger(__name__)

GITHUB_AUTHORIZE_URL = "https://github.com/login/oauth/authorize"
GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"
GITHUB_USER_URL = "https://api.github.com/user"


class OAuthError(Exception):
    """Raised when any step of the OAuth handshake fails."""


def _json_object(response: httpx.Response, what: str) -> Dict[str, Any]:
    try:
        payload = response.json()
    except ValueError as e:
        raise OAuthError(f"GitHub {what} response is not JSON") from e
    if not isinstance(payload, dict):
        raise OAuthError(f"GitHub {what} response is not a JSON object")
    return payload


@dataclass(frozen=True)
class GitHubProfile:
    github_id: str
    username: str
    display_name: str
    avatar_url: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "GitHubProfile":
        if data.get("id") is None:
            raise OAuthError("GitHub profile has no id")
        return cls(
            github_id=str(data["id"]),
            username=data.get("login") or "",
            display_name=data.get("name") or "",
            avatar_url=data.get("avatar_url") or "",
        )


class OAuthStateManager:
    """
    Manages OAuth state values for the authorization flow.

    Prevents CSRF by checking that the callback carries a state value this
    process issued, at most once, within the TTL.
    """

    def __init__(self, ttl_seconds: int = 600):
        self.ttl_seconds = ttl_seconds
        self._states: Dict[str, float] = {}  # state -> created_at
        self._lock = asyncio.Lock()

    async def create_state(self) -> str:
        state = secrets.token_urlsafe(32)
        async with self._lock:
            self._cleanup_expired_locked(time.time())
            self._states[state] = time.time()
        log.debug("Created OAuth state: %s", state[:8] + "...")
        return state

    async def validate_and_consume_state(self, state: Optional[str]) -> bool:
        if not state:
            return False
        async with self._lock:
            created_at = self._states.pop(state, None)

        if created_at is None:
            log.warning("OAuth state not found: %s", state[:8] + "...")
            return False

        age = time.time() - created_at
        if age > self.ttl_seconds:
            log.warning("OAuth state expired (age: %.1fs)", age)
            return False
        return True

    def _cleanup_expired_locked(self, now: float) -> None:
        expired = [s for s, created in self._states.items() if now - created > self.ttl_seconds]
        for state in expired:
            del self._states[state]
        if expired:
            log.debug("Cleaned up %d expired OAuth states", len(expired))


class GitHubOAuthHandler:
    """Builds GitHub authorize URLs and completes the code exchange."""

    def __init__(self, config: GitHubOAuthConfig, timeout_seconds: float = 10.0):
        self.config = config
        self.timeout_seconds = timeout_seconds
        self.state_manager = OAuthStateManager()
        log.info("GitHubOAuthHandler initialized: callback=%s", config.callback_url)

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    async def build_authorize_url(self) -> str:
        state = await self.state_manager.create_state()
        params = {
            "client_id": self.config.client_id,
            "redirect_uri": self.config.callback_url,
            "scope": self.config.scope,
            "state": state,
        }
        return f"{GITHUB_AUTHORIZE_URL}?{urlencode(params)}"

    async def complete_login(self, code: Optional[str], state: Optional[str]) -> GitHubProfile:
        """
        Validate the callback parameters and resolve the GitHub profile.

        Raises:
            OAuthError: On a missing code, invalid state, or a failed GitHub call
        """
        if not code:
            raise OAuthError("Missing authorization code")
        if not await self.state_manager.validate_and_consume_state(state):
            raise OAuthError("Invalid or expired state parameter")

        access_token = await self.exchange_code(code)
        return await self.fetch_profile(access_token)

    async def exchange_code(self, code: str) -> str:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.post(
                    GITHUB_TOKEN_URL,
                    data={
                        "client_id": self.config.client_id,
                        "client_secret": self.config.client_secret,
                        "code": code,
                        "redirect_uri": self.config.callback_url,
                    },
                    headers={"Accept": "application/json"},
                )
        except httpx.RequestError as e:
            raise OAuthError(f"Token exchange request failed: {e}") from e

        if response.status_code != 200:
            log.error(
                "Token exchange failed with status %d: %s",
                response.status_code,
                response.text,
            )
            raise OAuthError("Failed to exchange authorization code for token")

        payload = _json_object(response, "token exchange")
        access_token = payload.get("access_token")
        if not access_token:
            log.error("Token exchange returned no access token: %s", payload.get("error"))
            raise OAuthError("Failed to exchange authorization code for token")
        return access_token

    async def fetch_profile(self, access_token: str) -> GitHubProfile:
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.get(
                    GITHUB_USER_URL,
                    headers={
                        "Authorization": f"Bearer {access_token}",
                        "Accept": "application/vnd.github+json",
                    },
                )
        except httpx.RequestError as e:
            raise OAuthError(f"Profile request failed: {e}") from e

        if response.status_code != 200:
            log.error("GitHub profile request failed with status %d", response.status_code)
            raise OAuthError("Failed to fetch GitHub profile")

        return GitHubProfile.from_api(_json_object(response, "profile"))
