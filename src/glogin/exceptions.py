"""Domain exceptions for glogin."""


class GLoginError(Exception):
    """Base exception for glogin errors."""


class DecodingError(GLoginError):
    """A token or cookie could not be decoded.

    Raised for a wrong secret, corrupted or foreign text, characters outside
    the configured alphabet, missing salt framing, or a context mismatch.
    Applications should catch it and treat the visitor as anonymous; the
    message may contain the cookie context and must not reach end users.
    """


class GithubAPIError(GLoginError):
    """GitHub returned an error during the OAuth exchange."""

    def __init__(self, action: str, status_code: int, detail: str) -> None:
        self.action = action
        self.github_status_code = status_code
        self.detail = detail
        super().__init__(f"GitHub API error during {action}: HTTP {status_code} - {detail}")
