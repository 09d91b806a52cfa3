"""GitHub login with stateless, encrypted session cookies."""

from glogin.auth import GithubAuth
from glogin.codec import Codec
from glogin.constants import APP_VERSION, Alphabet, CipherMode
from glogin.cookie import ClosedCookie, OpenCookie
from glogin.exceptions import DecodingError, GithubAPIError, GLoginError
from glogin.schemas import CookieUser, GithubProfile, GithubTokenResponse, IdentityRecord

__version__ = APP_VERSION

__all__ = [
    "Alphabet",
    "CipherMode",
    "ClosedCookie",
    "Codec",
    "CookieUser",
    "DecodingError",
    "GLoginError",
    "GithubAPIError",
    "GithubAuth",
    "GithubProfile",
    "GithubTokenResponse",
    "IdentityRecord",
    "OpenCookie",
]
