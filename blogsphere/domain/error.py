"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they may not modify."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class AlreadyExistsError(DomainError):
    """Raised when a unique attribute is already taken."""

    def __init__(self, resource: str, field: str, value: str):
        super().__init__(f"{resource} with {field} '{value}' already exists")


class StorageOperationError(DomainError):
    """Raised when a write the store acknowledged did not take effect."""

    pass


class BrokenReplyChainError(DomainError):
    """Raised when a comment's ancestor chain references a missing comment.

    Only raised when strict ancestor chains are enabled; otherwise the
    counter walk stops at the gap.
    """

    def __init__(self, missing_id: str, walked: int):
        self.missing_id = missing_id
        self.walked = walked
        super().__init__(
            f"Ancestor comment {missing_id} is missing after {walked} updated ancestors"
        )
