"""glogin settings loaded from environment variables."""

import functools

from pydantic import model_validator
from pydantic_settings import BaseSettings

from glogin.constants import (
    DEFAULT_GITHUB_REDIRECT_URI,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_LOG_LEVEL,
    Alphabet,
    CipherMode,
)


class GLoginSettings(BaseSettings):
    """GitHub OAuth and cookie codec configuration."""

    # GitHub OAuth application
    GITHUB_CLIENT_ID: str = ""
    GITHUB_CLIENT_SECRET: str = ""
    GITHUB_REDIRECT_URI: str = DEFAULT_GITHUB_REDIRECT_URI

    # Cookie codec
    COOKIE_SECRET: str = ""
    COOKIE_ALPHABET: Alphabet = Alphabet.BASE58
    COOKIE_CIPHER_MODE: CipherMode | None = None  # None = inferred from COOKIE_SECRET

    HTTP_TIMEOUT_SECONDS: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    LOG_LEVEL: str = DEFAULT_LOG_LEVEL

    model_config = {"env_prefix": "GLOGIN_"}

    @model_validator(mode="after")
    def _check_cipher_mode(self) -> "GLoginSettings":
        if self.COOKIE_CIPHER_MODE is CipherMode.AES and not self.COOKIE_SECRET:
            raise ValueError("COOKIE_CIPHER_MODE=aes requires a non-empty COOKIE_SECRET")
        return self


@functools.lru_cache(maxsize=1)
def get_settings() -> GLoginSettings:
    """Return cached settings singleton."""
    return GLoginSettings()
