"""Identity models for Discord-authenticated players."""

from pydantic import BaseModel, ConfigDict, Field


class IdentityProfile(BaseModel):
    """Profile fields supplied by the authentication layer on each login."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="External identity id")
    user_name: str = Field(default="", description="Unique user name")
    display_name: str = Field(default="", description="Display name")
    avatar: str = Field(default="", description="Avatar URL")


class Identity(BaseModel):
    """Stored player record."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    user_name: str = Field(default="")
    display_name: str = Field(default="")
    avatar: str = Field(default="")
    high_score: int = Field(ge=0, default=0, description="Best frozen win streak")
    character_ids: list[int] = Field(default_factory=list, description="Owned player characters")
    version: int = Field(ge=0, default=0, description="Optimistic concurrency token")
