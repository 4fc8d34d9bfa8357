"""Abstract interface for user storage."""

from abc import ABC, abstractmethod

from signcrm.core.entities.user import User


class IUserStore(ABC):
    """Interface for user account persistence."""

    @abstractmethod
    def create_user(self, user: User) -> User:
        """Assign an id and append a new user.

        An explicit id that is already stored raises DuplicateRecordError.
        """
        pass

    @abstractmethod
    def get_user(self, user_id: str) -> User | None:
        """Get user by ID."""
        pass

    @abstractmethod
    def update_user(self, user: User) -> User:
        """Replace a stored user."""
        pass

    @abstractmethod
    def delete_user(self, user_id: str) -> bool:
        """Remove a user. Returns False if it did not exist."""
        pass

    @abstractmethod
    def list_users(self) -> list[User]:
        """List users in insertion order."""
        pass
