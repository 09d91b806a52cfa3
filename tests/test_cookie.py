"""Tests for OpenCookie and ClosedCookie."""

import pytest

from glogin.codec import Codec
from glogin.constants import Alphabet, CipherMode
from glogin.cookie import ClosedCookie, OpenCookie
from glogin.exceptions import DecodingError
from glogin.schemas import CookieUser, IdentityRecord

JEFFREY = {"id": "123", "login": "jeffrey", "avatar_url": "#"}


def test_encrypts_and_decrypts(secret: str) -> None:
    text = OpenCookie(
        {"id": "526301", "login": "yegor256", "avatar_url": "https://avatars1.githubusercontent.com/u/526301"},
        secret,
    ).serialize()
    user = ClosedCookie(text, secret).to_user()
    assert user.id == "526301"
    assert user.login == "yegor256"
    assert user.avatar_url == "https://avatars1.githubusercontent.com/u/526301"


def test_context_binding(secret: str) -> None:
    """A cookie reads back under its own context only."""
    text = OpenCookie(JEFFREY, secret, "127.0.0.1").serialize()
    user = ClosedCookie(text, secret, "127.0.0.1").to_user()
    assert user == CookieUser(id="123", login="jeffrey", avatar_url="#")
    with pytest.raises(DecodingError, match="Context '127.0.0.2' expected, but '127.0.0.1' found"):
        ClosedCookie(text, secret, "127.0.0.2").to_user()


def test_unbound_cookie_rejected_under_context(secret: str) -> None:
    text = OpenCookie(JEFFREY, secret).serialize()
    with pytest.raises(DecodingError, match="expected"):
        ClosedCookie(text, secret, "127.0.0.1").to_user()


def test_fails_on_wrong_secret() -> None:
    text = OpenCookie({"id": "1", "login": "x", "avatar_url": "x"}, "secret-1").serialize()
    with pytest.raises(DecodingError):
        ClosedCookie(text, "secret-2").to_user()


def test_decrypts_in_test_mode() -> None:
    user = ClosedCookie("123|test|http://example.com", "").to_user()
    assert user == CookieUser(id="123", login="test", avatar_url="http://example.com")


def test_test_mode_skips_context_check() -> None:
    user = ClosedCookie("123", "", "some context").to_user()
    assert user.id == "123"
    assert user.login is None
    assert user.avatar_url is None


def test_test_mode_serializes_plain_text() -> None:
    assert OpenCookie(JEFFREY, "", "ctx").serialize() == "123|jeffrey|#|ctx"


def test_separator_inside_fields_round_trips(secret: str) -> None:
    """A '|' or '%' in a value doesn't shift the fields that follow it."""
    identity = {"id": "7", "login": "a|b", "avatar_url": "https://x.test/a%20b?c=1|2"}
    text = OpenCookie(identity, secret, "ctx|1").serialize()
    user = ClosedCookie(text, secret, "ctx|1").to_user()
    assert user.login == "a|b"
    assert user.avatar_url == "https://x.test/a%20b?c=1|2"


def test_extra_trailing_part_is_ignored(secret: str) -> None:
    """A fifth field (the old bearer slot) doesn't break parsing."""
    text = Codec(secret).encrypt("123|jeffrey|#|ctx|some-bearer")
    user = ClosedCookie(text, secret, "ctx").to_user()
    assert user == CookieUser(id="123", login="jeffrey", avatar_url="#")


def test_bearer_is_not_written_into_cookie() -> None:
    identity = IdentityRecord(id="1", login="x", bearer="gho_secret")
    assert "gho_secret" not in OpenCookie(identity, "").serialize()


def test_cookie_without_id_is_rejected(secret: str) -> None:
    text = Codec(secret).encrypt("|jeffrey|#|")
    with pytest.raises(DecodingError, match="no user id"):
        ClosedCookie(text, secret).to_user()


def test_corrupted_cookie_is_rejected(secret: str) -> None:
    with pytest.raises(DecodingError):
        ClosedCookie("0OIl", secret).to_user()


def test_base64_alphabet(secret: str) -> None:
    text = OpenCookie(JEFFREY, secret, alphabet=Alphabet.BASE64).serialize()
    user = ClosedCookie(text, secret, alphabet=Alphabet.BASE64).to_user()
    assert user.login == "jeffrey"


def test_explicit_disabled_mode() -> None:
    text = OpenCookie(JEFFREY, "secret", mode=CipherMode.DISABLED).serialize()
    assert text == "123|jeffrey|#|"
    user = ClosedCookie("9|z", "secret", "ctx", mode=CipherMode.DISABLED).to_user()
    assert user.id == "9"


def test_open_accessors() -> None:
    cookie = OpenCookie({"id": 42, "login": "jeffrey", "avatarUrl": "#"}, "secret")
    assert cookie.id == "42"
    assert cookie.login == "jeffrey"
    assert cookie.avatar_url == "#"


def test_open_defaults_missing_fields() -> None:
    cookie = OpenCookie({"id": "1", "login": None}, "")
    assert cookie.login == ""
    assert cookie.avatar_url == ""
    assert str(cookie) == "1|||"


def test_open_preconditions() -> None:
    with pytest.raises(ValueError):
        OpenCookie(None, "secret")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        OpenCookie({"login": "x"}, "secret")
    with pytest.raises(ValueError):
        OpenCookie({"id": ""}, "secret")
    with pytest.raises(ValueError):
        OpenCookie(JEFFREY, None)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        OpenCookie(JEFFREY, "secret", None)  # type: ignore[arg-type]


def test_closed_preconditions() -> None:
    with pytest.raises(ValueError):
        ClosedCookie(None, "secret")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        ClosedCookie("text", None)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        ClosedCookie("text", "secret", None)  # type: ignore[arg-type]
