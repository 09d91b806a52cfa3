"""Pydantic schemas for GitHub API responses and cookie identities."""

from pydantic import AliasChoices, BaseModel, Field, field_validator


class IdentityRecord(BaseModel):
    """The identity written into a session cookie.

    ``id`` is mandatory; the other fields default to an empty string. Numeric
    ids (GitHub returns integers) are coerced to strings.
    """

    id: str = Field(min_length=1)
    login: str = ""
    avatar_url: str = Field(default="", validation_alias=AliasChoices("avatar_url", "avatarUrl"))
    bearer: str = ""

    model_config = {"frozen": True, "coerce_numbers_to_str": True}

    @field_validator("login", "avatar_url", "bearer", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class CookieUser(BaseModel):
    """Identity recovered from a session cookie; absent fields are None."""

    id: str
    login: str | None = None
    avatar_url: str | None = None

    model_config = {"frozen": True}


class GithubTokenResponse(BaseModel):
    """Response from GitHub's /login/oauth/access_token endpoint."""

    access_token: str
    token_type: str = "bearer"
    scope: str | None = None


class GithubProfile(BaseModel):
    """User profile from GitHub's /user endpoint."""

    id: int
    login: str
    avatar_url: str | None = None
    name: str | None = None
    email: str | None = None
    bearer: str = ""

    def to_identity(self) -> IdentityRecord:
        """Convert the profile into the record a session cookie carries."""
        return IdentityRecord(
            id=str(self.id),
            login=self.login,
            avatar_url=self.avatar_url or "",
            bearer=self.bearer,
        )
