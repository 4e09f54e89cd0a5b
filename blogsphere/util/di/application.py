"""Application layer DI providers."""

from dishka import Scope, provide

from blogsphere.application.usecase.blog import (
    CreateBlogUseCase,
    DeleteBlogUseCase,
    GetBlogUseCase,
    IncrementReadCountUseCase,
    ListBlogsUseCase,
    ToggleLikeUseCase,
    UpdateBlogUseCase,
)
from blogsphere.application.usecase.comment import (
    CreateCommentUseCase,
    CreateReplyUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from blogsphere.application.usecase.user import (
    GetUserProfileUseCase,
    ListUsersUseCase,
    RegisterUserUseCase,
    UpdateUserProfileUseCase,
)
from blogsphere.config import PaginationSettings
from blogsphere.domain.repository import Transaction
from blogsphere.domain.service import BlogService, CommentService, UserService
from blogsphere.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        transaction: Transaction,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            blog_service=blog_service,
            transaction=transaction,
        )

    @provide
    def get_create_reply_use_case(
        self, comment_service: CommentService, transaction: Transaction
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(
            comment_service=comment_service, transaction=transaction
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService, transaction: Transaction
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, transaction=transaction
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, transaction: Transaction
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, transaction=transaction
        )

    @provide
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        pagination_settings: PaginationSettings,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service,
            pagination_settings=pagination_settings,
        )

    # Blog use cases
    @provide
    def get_create_blog_use_case(
        self,
        blog_service: BlogService,
        user_service: UserService,
        transaction: Transaction,
    ) -> CreateBlogUseCase:
        """Provide create blog use case."""
        return CreateBlogUseCase(
            blog_service=blog_service,
            user_service=user_service,
            transaction=transaction,
        )

    @provide
    def get_get_blog_use_case(self, blog_service: BlogService) -> GetBlogUseCase:
        """Provide get blog use case."""
        return GetBlogUseCase(blog_service=blog_service)

    @provide
    def get_list_blogs_use_case(
        self,
        blog_service: BlogService,
        pagination_settings: PaginationSettings,
    ) -> ListBlogsUseCase:
        """Provide list blogs use case."""
        return ListBlogsUseCase(
            blog_service=blog_service, pagination_settings=pagination_settings
        )

    @provide
    def get_update_blog_use_case(
        self,
        blog_service: BlogService,
        user_service: UserService,
        transaction: Transaction,
    ) -> UpdateBlogUseCase:
        """Provide update blog use case."""
        return UpdateBlogUseCase(
            blog_service=blog_service,
            user_service=user_service,
            transaction=transaction,
        )

    @provide
    def get_delete_blog_use_case(
        self,
        blog_service: BlogService,
        comment_service: CommentService,
        user_service: UserService,
        transaction: Transaction,
    ) -> DeleteBlogUseCase:
        """Provide delete blog use case."""
        return DeleteBlogUseCase(
            blog_service=blog_service,
            comment_service=comment_service,
            user_service=user_service,
            transaction=transaction,
        )

    @provide
    def get_toggle_like_use_case(
        self, blog_service: BlogService, transaction: Transaction
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(blog_service=blog_service, transaction=transaction)

    @provide
    def get_increment_read_count_use_case(
        self,
        blog_service: BlogService,
        user_service: UserService,
        transaction: Transaction,
    ) -> IncrementReadCountUseCase:
        """Provide increment read count use case."""
        return IncrementReadCountUseCase(
            blog_service=blog_service,
            user_service=user_service,
            transaction=transaction,
        )

    # User use cases
    @provide
    def get_register_user_use_case(
        self, user_service: UserService, transaction: Transaction
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(
            user_service=user_service, transaction=transaction
        )

    @provide
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

    @provide
    def get_update_user_profile_use_case(
        self, user_service: UserService, transaction: Transaction
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(
            user_service=user_service, transaction=transaction
        )

    @provide
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)
