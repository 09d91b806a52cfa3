"""Centralized constants for glogin."""

import enum

# --- Package metadata ---

APP_VERSION = "0.1.0"


# --- Cookie codec ---


class Alphabet(enum.StrEnum):
    """Text alphabets a token can be encoded in."""

    BASE58 = "base58"
    BASE64 = "base64"


class CipherMode(enum.StrEnum):
    """Whether the codec encrypts at all.

    ``DISABLED`` turns encrypt/decrypt into identity transforms for
    application tests that should not depend on real cryptography.
    """

    AES = "aes"
    DISABLED = "disabled"


BASE58_CHARS = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

AES_KEY_LENGTH = 32  # AES-256
AES_BLOCK_BITS = 128

SALT_MIN_LENGTH = 8
SALT_MAX_LENGTH = 32
SALT_SEPARATOR = " "

FIELD_SEPARATOR = "|"
MAX_COOKIE_PARTS = 5


# --- GitHub OAuth ---

GITHUB_AUTHORIZE_URL = "https://github.com/login/oauth/authorize"
GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"
GITHUB_USER_URL = "https://api.github.com/user"

# Default configuration values
DEFAULT_GITHUB_REDIRECT_URI = "http://localhost:8000/github-callback"
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"
