"""GitHub OAuth client — authorization URL and code-for-profile exchange."""

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlencode

import httpx

from glogin.constants import (
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    GITHUB_AUTHORIZE_URL,
    GITHUB_TOKEN_URL,
    GITHUB_USER_URL,
)
from glogin.exceptions import GithubAPIError
from glogin.schemas import GithubProfile, GithubTokenResponse

if TYPE_CHECKING:
    from glogin.settings import GLoginSettings

logger = logging.getLogger(__name__)


class GithubAuth:
    """Handles the GitHub OAuth web flow for one OAuth application.

    :meth:`login_uri` is where the visitor is redirected to sign in; GitHub
    then calls the redirect URI back with a ``code``, which :meth:`user`
    trades for the visitor's profile.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    ) -> None:
        if client_id is None:
            raise ValueError("GitHub client ID can't be None")
        if client_secret is None:
            raise ValueError("GitHub client secret can't be None")
        if redirect_uri is None:
            raise ValueError("Redirect URI can't be None")
        self._client_id = client_id
        self._client_secret = client_secret
        self._redirect_uri = redirect_uri
        self._timeout = timeout

    @classmethod
    def from_settings(cls, settings: "GLoginSettings") -> "GithubAuth":
        """Build a client from the GitHub settings."""
        return cls(
            settings.GITHUB_CLIENT_ID,
            settings.GITHUB_CLIENT_SECRET,
            settings.GITHUB_REDIRECT_URI,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )

    def login_uri(self, state: str | None = None) -> str:
        """Build the GitHub authorization redirect URL."""
        params = {"client_id": self._client_id, "redirect_uri": self._redirect_uri}
        if state:
            params["state"] = state
        return f"{GITHUB_AUTHORIZE_URL}?{urlencode(params)}"

    async def user(self, code: str) -> GithubProfile:
        """Exchange an authorization code for the authenticated user's profile.

        The returned profile carries the access token in ``bearer``.

        Raises:
            ValueError: If *code* is None.
            GithubAPIError: If either GitHub call fails.
        """
        if code is None:
            raise ValueError("Code can't be None")
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            token = await self._access_token(client, code)
            response = await client.get(
                GITHUB_USER_URL,
                headers={
                    "Accept": "application/vnd.github+json",
                    "Authorization": f"Bearer {token.access_token}",
                },
            )
            self._check_github_response(response, "fetch user profile")
        profile = GithubProfile.model_validate(response.json())
        logger.info("Authenticated GitHub user %s", profile.login)
        return profile.model_copy(update={"bearer": token.access_token})

    async def access_token(self, code: str) -> GithubTokenResponse:
        """Exchange an authorization code for an access token."""
        if code is None:
            raise ValueError("Code can't be None")
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await self._access_token(client, code)

    async def _access_token(self, client: httpx.AsyncClient, code: str) -> GithubTokenResponse:
        response = await client.post(
            GITHUB_TOKEN_URL,
            data={
                "code": code,
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "redirect_uri": self._redirect_uri,
            },
            headers={"Accept": "application/json"},
        )
        self._check_github_response(response, "exchange authorization code")
        payload = response.json()
        # GitHub reports a bad or expired code as HTTP 200 with an error body
        if "error" in payload:
            detail = payload.get("error_description") or payload["error"]
            logger.warning("GitHub rejected the authorization code: %s", payload["error"])
            raise GithubAPIError(action="exchange authorization code", status_code=response.status_code, detail=detail)
        return GithubTokenResponse.model_validate(payload)

    @staticmethod
    def _check_github_response(response: httpx.Response, action: str) -> None:
        """Raise GithubAPIError with a descriptive message if the response is not OK."""
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            if status == 429 or (status == 403 and exc.response.headers.get("x-ratelimit-remaining") == "0"):
                detail = f"Rate limited by GitHub while trying to {action}. Please try again later."
            elif status >= 500:
                detail = f"GitHub server error while trying to {action}. This is likely a transient issue."
            elif status == 401:
                detail = f"GitHub authentication failed while trying to {action}. Check client credentials."
            else:
                detail = f"GitHub returned HTTP {status} while trying to {action}."
            logger.warning("GitHub API error during %s: HTTP %d", action, status)
            raise GithubAPIError(action=action, status_code=status, detail=detail) from exc
