"""Domain value objects for Blogsphere.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
import secrets

from pydantic import field_validator

from blogsphere.domain.value.common import RootValueObject

_SLUG_SPECIAL_CHARS = re.compile(r"[^a-zA-Z0-9]+")


class TagName(RootValueObject[str]):
    """Tag attached to a blog.

    Tags are stored lowercased; 1-30 characters.
    """

    @field_validator("root")
    @classmethod
    def normalize_tag(cls, v: str) -> str:
        """Strip and lowercase the tag."""
        v = v.strip().lower()
        if len(v) < 1 or len(v) > 30:
            raise ValueError("Tag must be 1-30 characters")
        return v


class Username(RootValueObject[str]):
    """Public username, unique per user."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username characters and length."""
        if not re.match(r"^[a-z0-9._-]{3,50}$", v):
            raise ValueError(
                "Username must be 3-50 characters: lowercase letters, digits, '.', '_' or '-'"
            )
        return v


class Slug(RootValueObject[str]):
    """URL-safe public identifier of a blog.

    Built from the title with a random suffix so two blogs with the same
    title never collide. Examples: 'how-to-setup-zustand-k3j9x2pq1a'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 120:
            raise ValueError("Slug must be at most 120 characters")
        return v

    @classmethod
    def from_title(cls, title: str) -> "Slug":
        """Generate a fresh slug for a title."""
        base = _SLUG_SPECIAL_CHARS.sub("-", title.lower()).strip("-")[:100]
        suffix = secrets.token_hex(5)
        return cls(f"{base}-{suffix}" if base else suffix)
