"""Session cookie: an identity record sealed by :class:`~glogin.codec.Codec`.

The cookie body is ``id|login|avatar_url|context``. Field values are
percent-escaped for ``%`` and ``|`` so a separator inside a value can't
shift the fields. The context binds a cookie to whatever the application
chooses (a client IP, a purpose string); a cookie only reads back under the
context it was minted for.
"""

import logging
from collections.abc import Mapping
from urllib.parse import unquote

from glogin.codec import Codec
from glogin.constants import FIELD_SEPARATOR, MAX_COOKIE_PARTS, Alphabet, CipherMode
from glogin.exceptions import DecodingError
from glogin.schemas import CookieUser, IdentityRecord

logger = logging.getLogger(__name__)


def _escape(value: str) -> str:
    return value.replace("%", "%25").replace(FIELD_SEPARATOR, "%7C")


class OpenCookie:
    """Outbound cookie built from an identity, e.g. the GitHub profile.

    Call :meth:`serialize` and send the result to the client as the cookie
    value.
    """

    def __init__(
        self,
        identity: IdentityRecord | Mapping[str, object],
        secret: str,
        context: str = "",
        *,
        alphabet: Alphabet = Alphabet.BASE58,
        mode: CipherMode | None = None,
    ) -> None:
        if identity is None:
            raise ValueError("Identity can't be None")
        if context is None:
            raise ValueError("Context can't be None")
        if not isinstance(identity, IdentityRecord):
            identity = IdentityRecord.model_validate(dict(identity))
        self._identity = identity
        self._codec = Codec(secret, alphabet, mode)
        self._context = context

    @property
    def id(self) -> str:
        return self._identity.id

    @property
    def login(self) -> str:
        return self._identity.login

    @property
    def avatar_url(self) -> str:
        return self._identity.avatar_url

    def serialize(self) -> str:
        """Return the text to drop back to the user as a cookie."""
        fields = [self._identity.id, self._identity.login, self._identity.avatar_url, self._context]
        return self._codec.encrypt(FIELD_SEPARATOR.join(_escape(f) for f in fields))

    def __str__(self) -> str:
        return self.serialize()


class ClosedCookie:
    """Inbound cookie text received from the client.

    :meth:`to_user` raises :class:`DecodingError` for anything that isn't a
    valid cookie for this secret and context; catch it and treat the visitor
    as anonymous.
    """

    def __init__(
        self,
        text: str,
        secret: str,
        context: str = "",
        *,
        alphabet: Alphabet = Alphabet.BASE58,
        mode: CipherMode | None = None,
    ) -> None:
        if text is None:
            raise ValueError("Text can't be None")
        if context is None:
            raise ValueError("Context can't be None")
        self._text = text
        self._codec = Codec(secret, alphabet, mode)
        self._context = context

    def to_user(self) -> CookieUser:
        """Decode the cookie and return the identity it carries.

        With encryption disabled the text is read verbatim and the context is
        not checked.
        """
        plain = self._codec.decrypt(self._text)
        parts: list[str | None] = [unquote(p) for p in plain.split(FIELD_SEPARATOR, MAX_COOKIE_PARTS - 1)]
        parts += [None] * (4 - len(parts))
        user_id, login, avatar_url, found = parts[:4]
        if not user_id:
            raise DecodingError("Cookie carries no user id")
        if not self._codec.disabled and (found or "") != self._context:
            logger.debug("Cookie context mismatch for user %s", user_id)
            raise DecodingError(f"Context '{self._context}' expected, but '{found or ''}' found")
        return CookieUser(id=user_id, login=login, avatar_url=avatar_url)
