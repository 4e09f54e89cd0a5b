"""End-to-end tests for how a request's database session is finalized."""

import asyncio
from uuid import UUID, uuid4

from dishka import Scope, make_async_container, provide
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blogsphere.domain.repository import (
    BlogRepository,
    CommentRepository,
    UserRepository,
)
from blogsphere.domain.value import CommentId
from blogsphere.interface.api.app import create_app
from blogsphere.persistence.repository.inmemory import (
    InMemoryBlogRepository,
    InMemoryCommentRepository,
    InMemoryUserRepository,
)
from blogsphere.util.di import PROVIDERS, PersistenceProvider, get_provider
from blogsphere.util.di.infrastructure.persistence import ProdPersistenceProvider


class RecordingSession:
    """Session double that records whether it was committed or rolled back."""

    def __init__(self, events: list[str]) -> None:
        self.events = events
        self._open = True

    async def __aenter__(self) -> "RecordingSession":
        return self

    async def __aexit__(self, *exc_info) -> bool:
        return False

    def in_transaction(self) -> bool:
        return self._open

    async def commit(self) -> None:
        self.events.append("commit")
        self._open = False

    async def rollback(self) -> None:
        self.events.append("rollback")
        self._open = False


class RecordingPersistenceProvider(ProdPersistenceProvider):
    """Production session handling over recording sessions.

    Repositories are in-memory and shared across requests, so only the
    session lifecycle of the production provider is under test.
    """

    def __init__(self) -> None:
        super().__init__()
        self.events: list[str] = []
        self.users = InMemoryUserRepository()
        self.blogs = InMemoryBlogRepository()
        self.comments = InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_session_factory(self) -> async_sessionmaker[AsyncSession]:
        return lambda: RecordingSession(self.events)

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        return self.users

    @provide(scope=Scope.APP)
    def get_blog_repository(self) -> BlogRepository:
        return self.blogs

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        return self.comments


@pytest.fixture
def recording(monkeypatch) -> RecordingPersistenceProvider:
    """Recording provider, with strict ancestor chains switched on."""
    monkeypatch.setenv("COMMENTS__STRICT_ANCESTOR_CHAIN", "true")
    monkeypatch.setenv("COMMENTS__CASCADE_DELETE_REPLIES", "true")
    return RecordingPersistenceProvider()


@pytest.fixture
def client(recording):
    """Test client whose requests run on recording sessions."""
    providers = [
        get_provider(base, use_mock=False)()
        for base in PROVIDERS
        if base is not PersistenceProvider
    ]
    container = make_async_container(*providers, recording, FastapiProvider())
    with TestClient(create_app(container)) as test_client:
        yield test_client


class TestRequestTransactions:
    """A request commits its session only when its use case succeeds."""

    def test_successful_write_commits(self, client, recording, published_blog):
        """Should commit the session of a successful comment."""
        blog, cookies = published_blog
        recording.events.clear()

        response = client.post(
            "/comments",
            json={"blog_id": blog["blog_id"], "content": "Top"},
            cookies=cookies,
        )

        assert response.status_code == 201
        assert recording.events == ["commit"]

    def test_failed_reply_rolls_back(self, client, recording, published_blog):
        """Should roll back, not commit, when a reply fails halfway with a 500."""
        # Arrange
        blog, cookies = published_blog
        top = client.post(
            "/comments",
            json={"blog_id": blog["blog_id"], "content": "Top"},
            cookies=cookies,
        )
        top_id = top.json()["comment"]["comment_id"]
        reply = client.post(
            "/comments/replies",
            json={"comment_id": top_id, "content": "Reply"},
            cookies=cookies,
        )
        reply_id = reply.json()["comment"]["comment_id"]
        # The top comment vanishes without its reply going with it
        asyncio.run(recording.comments.delete(CommentId(UUID(top_id))))
        recording.events.clear()

        # Act
        response = client.post(
            "/comments/replies",
            json={"comment_id": reply_id, "content": "Nested"},
            cookies=cookies,
        )

        # Assert
        assert response.status_code == 500
        assert recording.events == ["rollback"]

    def test_not_found_does_not_commit(self, client, recording, published_blog):
        """Should roll back when the use case raises a 404."""
        _, cookies = published_blog
        recording.events.clear()

        response = client.post(
            "/comments/replies",
            json={"comment_id": str(uuid4()), "content": "Hi"},
            cookies=cookies,
        )

        assert response.status_code == 404
        assert "commit" not in recording.events
