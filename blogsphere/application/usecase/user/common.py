"""Response items shared by user use cases."""

from datetime import datetime

from pydantic import BaseModel

from blogsphere.domain.model.user import User


class UserProfileItem(BaseModel):
    """Public user profile."""

    user_id: str
    username: str
    fullname: str
    bio: str | None
    profile_image: str | None
    social_links: dict[str, str]
    total_posts: int
    total_reads: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfileItem":
        return cls(
            user_id=str(user.id),
            username=str(user.username),
            fullname=user.fullname,
            bio=user.bio,
            profile_image=user.profile_image,
            social_links=user.social_links.model_dump(),
            total_posts=user.total_posts,
            total_reads=user.total_reads,
            created_at=user.created_at,
        )
