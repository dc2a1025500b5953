"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthenticatedError(DomainError):
    """Raised when an operation requires a session and none is active."""

    def __init__(self) -> None:
        super().__init__("No authenticated user")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a resource they do not own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvitationNotFoundError(DomainError):
    """Invitation code is unknown, already used or expired.

    The three cases are deliberately indistinguishable so that callers
    cannot tell which codes ever existed.
    """

    def __init__(self) -> None:
        super().__init__("Invitation not found or expired")


class SelfAcceptanceError(BusinessRuleViolationError):
    """Raised when a user redeems their own invitation."""

    def __init__(self) -> None:
        super().__init__("Cannot accept your own invitation")


class AlreadyFriendsError(BusinessRuleViolationError):
    """Raised when an accepted friendship already links two users."""

    def __init__(self, user_id: str, friend_id: str):
        self.user_id = user_id
        self.friend_id = friend_id
        super().__init__(f"Users {user_id} and {friend_id} are already friends")


class WindowClosedError(BusinessRuleViolationError):
    """Raised when posting outside every open window."""

    def __init__(self) -> None:
        super().__init__("No posting window is open")


class AlreadyPostedTodayError(BusinessRuleViolationError):
    """Raised when a user already posted a moment today."""

    def __init__(self, user_id: str):
        super().__init__(f"User {user_id} already posted today")


class TransientError(DomainError):
    """Network, timeout or unavailable store. Safe to retry the operation."""

    pass


class ConflictError(DomainError):
    """Uniqueness constraint violation."""

    pass


class FriendRequestExistsError(ConflictError):
    """Raised when a pending request already links two users."""

    def __init__(self, user_id: str, friend_id: str):
        super().__init__(f"A friend request between {user_id} and {friend_id} exists")
