"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from blogsphere.config import CommentSettings, Settings


class TestCommentSettings:
    """Tests for the comment tree flags."""

    def test_defaults_keep_orphans_and_stop_silently(self):
        """Out of the box replies survive their parent and gaps are tolerated."""
        settings = CommentSettings()

        assert settings.cascade_delete_replies is False
        assert settings.strict_ancestor_chain is False

    def test_strict_chain_requires_cascading_deletes(self):
        """Orphaned replies would make every strict walk fail."""
        with pytest.raises(ValidationError, match="cascade_delete_replies"):
            CommentSettings(strict_ancestor_chain=True)

    def test_strict_chain_with_cascade_is_accepted(self):
        settings = CommentSettings(
            strict_ancestor_chain=True, cascade_delete_replies=True
        )

        assert settings.strict_ancestor_chain is True

    def test_environment_is_validated_at_startup(self, monkeypatch):
        """A half-configured environment fails when settings load."""
        monkeypatch.setenv("COMMENTS__STRICT_ANCESTOR_CHAIN", "true")
        monkeypatch.delenv("COMMENTS__CASCADE_DELETE_REPLIES", raising=False)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
