"""In-memory request transaction for testing."""

from blogsphere.domain.repository import Transaction


class InMemoryTransaction(Transaction):
    """Counts rollbacks. In-memory repositories cannot undo their writes."""

    def __init__(self) -> None:
        self.rollbacks = 0

    async def rollback(self) -> None:
        self.rollbacks += 1
