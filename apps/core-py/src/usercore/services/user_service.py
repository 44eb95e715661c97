"""User application service: create, read, update and delete use cases."""

from usercore.errors import DuplicateEmailError, UserNotFoundError
from usercore.models.dto import CreateUserRequest, UpdateUserRequest, UserResponse
from usercore.models.user import User, apply_update
from usercore.services.app_logger import AppLogger
from usercore.services.notifier import Notifier
from usercore.services.user_store import UserStore


class UserService:
    """Orchestrates user use cases over the store, logger and notifier ports.

    The service keeps no state of its own; every read goes to the store.
    Validation, not-found and duplicate-email failures propagate to the caller.
    Notifier failures are logged and suppressed.

    Note: the existence check and the save in ``create`` are not atomic, so two
    concurrent creates with the same email can both succeed.
    """

    def __init__(self, store: UserStore, logger: AppLogger, notifier: Notifier) -> None:
        """Initialize the service.

        Args:
            store: Persistence port
            logger: Observability port
            notifier: Messaging port
        """
        self.store = store
        self.logger = logger
        self.notifier = notifier

    async def create(self, request: CreateUserRequest) -> UserResponse:
        """Register a new user.

        Args:
            request: Name and email of the new user

        Returns:
            The created user

        Raises:
            DuplicateEmailError: If the email is already registered
            UserValidationError: If the name or email is invalid
        """
        self.logger.info("Creating user", {"email": request.email})

        if request.email is not None and await self.store.exists(request.email):
            self.logger.warn("Email already registered", {"email": request.email})
            raise DuplicateEmailError(request.email)

        user = User(name=request.name, email=request.email)
        await self.store.save(user)
        self.logger.info("User created", {"user_id": user.user_id})

        try:
            await self.notifier.send_welcome(user)
        except Exception as e:
            self.logger.error(f"Welcome email failed for user {user.user_id}", e)

        return UserResponse.from_user(user)

    async def list_users(self) -> list[UserResponse]:
        """List every user."""
        self.logger.info("Listing users")
        users = await self.store.list_all()
        self.logger.info("Users listed", {"count": len(users)})
        return [UserResponse.from_user(user) for user in users]

    async def get_by_id(self, user_id: str) -> UserResponse:
        """Get a user by ID.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        self.logger.info("Fetching user", {"user_id": user_id})
        user = await self._require(user_id)
        return UserResponse.from_user(user)

    async def update(self, request: UpdateUserRequest) -> UserResponse:
        """Replace the name and/or email of an existing user.

        The duplicate-email check only runs when a different email is supplied.

        Args:
            request: Target user ID and the fields to change

        Returns:
            The updated user

        Raises:
            UserNotFoundError: If no user has the requested ID
            DuplicateEmailError: If the new email belongs to another user
            UserValidationError: If the resulting name or email is invalid
        """
        self.logger.info("Updating user", {"user_id": request.user_id})
        current = await self._require(request.user_id)

        if request.email is not None and request.email != current.email:
            if await self.store.exists(request.email):
                self.logger.warn("Email already registered", {"email": request.email})
                raise DuplicateEmailError(request.email)

        updated = apply_update(current, request)
        await self.store.save(updated)
        self.logger.info("User updated", {"user_id": updated.user_id})

        try:
            await self.notifier.send_update_notice(updated)
        except Exception as e:
            self.logger.error(f"Update notice failed for user {updated.user_id}", e)

        return UserResponse.from_user(updated)

    async def delete(self, user_id: str) -> bool:
        """Delete a user.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        self.logger.info("Deleting user", {"user_id": user_id})
        if not await self.store.delete(user_id):
            self.logger.warn("User not found", {"user_id": user_id})
            raise UserNotFoundError(user_id)

        self.logger.info("User deleted", {"user_id": user_id})
        return True

    async def search(self, term: str) -> list[UserResponse]:
        """Search users by partial, case-insensitive name or email."""
        self.logger.info("Searching users", {"term": term})
        users = await self.store.search(term)
        self.logger.info("Search finished", {"term": term, "count": len(users)})
        return [UserResponse.from_user(user) for user in users]

    async def _require(self, user_id: str) -> User:
        user = await self.store.find_by_id(user_id)
        if user is None:
            self.logger.warn("User not found", {"user_id": user_id})
            raise UserNotFoundError(user_id)
        return user
