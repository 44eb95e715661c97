"""User store port with an in-memory implementation."""

import logging
from abc import ABC, abstractmethod

from usercore.models.user import User

logger = logging.getLogger(__name__)


class UserStore(ABC):
    """Abstract interface for user persistence."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert or overwrite a user, keyed by user_id."""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> User | None:
        """Get a user by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        """Get the first user whose email equals ``email`` exactly."""
        pass

    @abstractmethod
    async def list_all(self) -> list[User]:
        """List all users. Ordering is not guaranteed."""
        pass

    @abstractmethod
    async def search(self, term: str) -> list[User]:
        """Search for users by name or email (partial match, case-insensitive).

        Args:
            term: Text to look for in names and emails

        Returns:
            List of User objects matching the search term
        """
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> bool:
        """Delete a user.

        Returns:
            True if a user existed and was removed
        """
        pass

    async def exists(self, email: str) -> bool:
        """Check whether any user is registered with ``email``."""
        return await self.find_by_email(email) is not None


class InMemoryUserStore(UserStore):
    """Dictionary-backed UserStore, preserving insertion order."""

    def __init__(self) -> None:
        """Initialize the store."""
        self.users: dict[str, User] = {}

    async def save(self, user: User) -> None:
        self.users[user.user_id] = user

    async def find_by_id(self, user_id: str) -> User | None:
        return self.users.get(user_id)

    async def find_by_email(self, email: str) -> User | None:
        return next((user for user in self.users.values() if user.email == email), None)

    async def list_all(self) -> list[User]:
        return list(self.users.values())

    async def search(self, term: str) -> list[User]:
        if not term or not term.strip():
            return []

        search_term_lower = term.strip().lower()
        return [
            user
            for user in self.users.values()
            if search_term_lower in user.name.lower() or search_term_lower in user.email.lower()
        ]

    async def delete(self, user_id: str) -> bool:
        if user_id in self.users:
            del self.users[user_id]
            return True
        logger.debug("Delete requested for unknown user %s", user_id)
        return False

    def count(self) -> int:
        """Number of stored users."""
        return len(self.users)

    def clear(self) -> None:
        """Remove every stored user."""
        self.users.clear()
