"""User aggregate root."""

import re
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from blogsphere.domain.model.common import DomainModel
from blogsphere.domain.value import UserId, Username

_URL = re.compile(r"^https?://\S+$")


class SocialLinks(DomainModel):
    """Links shown on a profile. An empty string means no link."""

    youtube: str = ""
    instagram: str = ""
    facebook: str = ""
    twitter: str = ""
    github: str = ""
    website: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def validate_url(cls, v: str) -> str:
        v = (v or "").strip()
        if v and not _URL.match(v):
            raise ValueError(f"Invalid link: {v}")
        return v


class User(DomainModel):
    """User aggregate root.

    Credentials live with the external identity provider; this is the
    public profile plus the account counters.
    """

    id: UserId
    username: Username
    fullname: str = Field(min_length=2, max_length=50)
    email: str = Field(min_length=5, max_length=255)
    bio: Optional[str] = Field(default=None, max_length=200)
    profile_image: Optional[str] = None
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    total_posts: int = Field(default=0, ge=0)
    total_reads: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
