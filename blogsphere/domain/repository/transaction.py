"""Request transaction interface."""

from abc import ABC, abstractmethod


class Transaction(ABC):
    """The unit of work shared by every repository of one request.

    Use cases that write run inside ``async with transaction:``. Any
    exception leaving the block rolls back everything the request wrote,
    so a failure halfway up a reply chain leaves no counter changed even
    after the route has turned the error into an HTTP response.
    """

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every write of the current request."""
        pass

    async def __aenter__(self) -> "Transaction":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        if exc is not None:
            await self.rollback()
        return False
