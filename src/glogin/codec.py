"""Salted AES-256-CBC codec turning short text into an opaque cookie token."""

import hashlib
import logging
import secrets
from typing import TYPE_CHECKING

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from glogin import encoding
from glogin.constants import (
    AES_BLOCK_BITS,
    AES_KEY_LENGTH,
    SALT_MAX_LENGTH,
    SALT_MIN_LENGTH,
    SALT_SEPARATOR,
    Alphabet,
    CipherMode,
)
from glogin.exceptions import DecodingError

if TYPE_CHECKING:
    from glogin.settings import GLoginSettings

logger = logging.getLogger(__name__)

_ZERO_IV = bytes(AES_BLOCK_BITS // 8)


class Codec:
    """Reversible text transform: salt, encrypt, then encode in an alphabet.

    Every call to :meth:`encrypt` prepends a fresh random salt, so the same
    plaintext never produces the same token twice. :meth:`decrypt` fails with
    :class:`DecodingError` instead of returning garbage when the token was
    made with another secret or has been altered.

    With :attr:`CipherMode.DISABLED` both directions return their input
    unchanged. When *mode* is not given it is inferred from the secret: an
    empty secret disables encryption.
    """

    def __init__(
        self,
        secret: str,
        alphabet: Alphabet = Alphabet.BASE58,
        mode: CipherMode | None = None,
    ) -> None:
        if secret is None:
            raise ValueError("Secret can't be None")
        if mode is None:
            mode = CipherMode.AES if secret else CipherMode.DISABLED
        mode = CipherMode(mode)
        if mode is CipherMode.AES and not secret:
            raise ValueError("AES cipher mode requires a non-empty secret")
        self._secret = secret
        self._alphabet = Alphabet(alphabet)
        self._mode = mode

    @classmethod
    def from_settings(cls, settings: "GLoginSettings") -> "Codec":
        """Build a codec from the cookie settings."""
        return cls(settings.COOKIE_SECRET, settings.COOKIE_ALPHABET, settings.COOKIE_CIPHER_MODE)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def mode(self) -> CipherMode:
        return self._mode

    @property
    def disabled(self) -> bool:
        return self._mode is CipherMode.DISABLED

    def encrypt(self, plaintext: str) -> str:
        """Encrypt *plaintext* into a single-line token."""
        if plaintext is None:
            raise ValueError("Text can't be None")
        if self.disabled:
            return plaintext
        buffer = f"{_salt()}{SALT_SEPARATOR}{plaintext}".encode()
        padder = padding.PKCS7(AES_BLOCK_BITS).padder()
        padded = padder.update(buffer) + padder.finalize()
        encryptor = self._cipher().encryptor()
        encrypted = encryptor.update(padded) + encryptor.finalize()
        return encoding.encode(encrypted, self._alphabet)

    def decrypt(self, token: str) -> str:
        """Recover the plaintext from a token made by :meth:`encrypt`.

        Raises:
            ValueError: If *token* is None.
            DecodingError: If the token is malformed, was made with another
                secret, or lost its salt framing.
        """
        if token is None:
            raise ValueError("Text can't be None")
        if self.disabled:
            return token
        raw = encoding.decode(token, self._alphabet)
        if not raw:
            raise DecodingError("Token decodes to an empty payload")
        try:
            decryptor = self._cipher().decryptor()
            padded = decryptor.update(raw) + decryptor.finalize()
            unpadder = padding.PKCS7(AES_BLOCK_BITS).unpadder()
            text = (unpadder.update(padded) + unpadder.finalize()).decode()
        except ValueError as exc:
            logger.debug("Cipher rejected a %s token: %s", self._alphabet, exc)
            raise DecodingError(str(exc)) from exc
        salt, separator, body = text.partition(SALT_SEPARATOR)
        if not salt or not separator:
            raise DecodingError("Decrypted text has no salt")
        return body

    def digest(self) -> bytes:
        """Derive the AES key: leading hex characters of SHA-1 of the secret."""
        return hashlib.sha1(self._secret.encode()).hexdigest()[:AES_KEY_LENGTH].encode("ascii")

    def _cipher(self) -> Cipher:  # type: ignore[type-arg]
        return Cipher(algorithms.AES(self.digest()), modes.CBC(_ZERO_IV))


def _salt() -> str:
    """Random URL-safe salt; never contains the salt separator."""
    length = SALT_MIN_LENGTH + secrets.randbelow(SALT_MAX_LENGTH - SALT_MIN_LENGTH + 1)
    return secrets.token_urlsafe(SALT_MAX_LENGTH)[:length]
