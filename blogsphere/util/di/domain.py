"""Domain layer DI providers."""

from dishka import Scope, provide

from blogsphere.config import AuthSettings, CommentSettings
from blogsphere.domain.repository import (
    BlogRepository,
    CommentRepository,
    UserRepository,
)
from blogsphere.domain.service import (
    BlogService,
    CommentService,
    CounterPropagator,
    JWTService,
    UserService,
)
from blogsphere.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_counter_propagator(
        self,
        comment_repository: CommentRepository,
        blog_repository: BlogRepository,
        comment_settings: CommentSettings,
    ) -> CounterPropagator:
        """Provide counter propagation service."""
        return CounterPropagator(
            comment_repository=comment_repository,
            blog_repository=blog_repository,
            comment_settings=comment_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        counter_propagator: CounterPropagator,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            counter_propagator=counter_propagator,
            comment_settings=comment_settings,
        )

    @provide
    def get_blog_service(self, blog_repository: BlogRepository) -> BlogService:
        """Provide blog domain service."""
        return BlogService(blog_repository=blog_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
