"""In-memory implementation of user storage."""

from signcrm.config import get_logger
from signcrm.core.entities.user import User
from signcrm.core.exceptions import UserNotFoundError
from signcrm.core.interfaces.user_store import IUserStore
from signcrm.infrastructure.storage.memory.base import InMemoryCollection

logger = get_logger(__name__)


class InMemoryUserStore(IUserStore):
    """User accounts kept for the lifetime of the process."""

    def __init__(self) -> None:
        self._users: InMemoryCollection[User] = InMemoryCollection("user")

    def create_user(self, user: User) -> User:
        created = self._users.add(user)
        logger.debug("user_created", user_id=created.id)
        return created

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def update_user(self, user: User) -> User:
        if not self._users.contains(user.id):
            raise UserNotFoundError(user.id or "")
        return self._users.replace(user.id, user)  # type: ignore[arg-type]

    def delete_user(self, user_id: str) -> bool:
        return self._users.remove(user_id)

    def list_users(self) -> list[User]:
        return self._users.values()
