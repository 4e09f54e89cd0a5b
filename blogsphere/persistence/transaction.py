"""SQLAlchemy session backed request transaction."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from blogsphere.domain.repository import Transaction


class SessionTransaction(Transaction):
    """Rolls back the request's database session.

    The session provider only commits a session that still has an open
    transaction, so a rolled back request commits nothing.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def rollback(self) -> None:
        if self.session.in_transaction():
            await self.session.rollback()
            logfire.warn("Request transaction rolled back")
