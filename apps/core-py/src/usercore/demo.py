"""Scripted walkthrough of the user service."""

import asyncio
import logging

from usercore.config import get_core_config
from usercore.errors import UserDomainError
from usercore.models.dto import CreateUserRequest, UpdateUserRequest, UserResponse
from usercore.services.user_service import UserService
from usercore.wiring import build_user_service

logger = logging.getLogger(__name__)

SAMPLE_USERS = [
    ("Juan Pérez", "juan@example.com"),
    ("María García", "maria@example.com"),
    ("Carlos López", "carlos@example.com"),
]


def _show(label: str, user: UserResponse) -> None:
    print(f"{label}: {user.user_id} {user.name} <{user.email}> created {user.created_at.isoformat()}")


async def run_demo(service: UserService) -> list[UserResponse]:
    """Run the demo scenario against ``service``.

    Returns:
        The users remaining at the end of the run
    """
    created = []
    for name, email in SAMPLE_USERS:
        user = await service.create(CreateUserRequest(name=name, email=email))
        _show("Created", user)
        created.append(user)
    juan, maria, carlos = created

    print(f"Listing {len(await service.list_users())} users")
    _show("Fetched", await service.get_by_id(juan.user_id))

    updated = await service.update(
        UpdateUserRequest(user_id=maria.user_id, name="María García Silva", email="maria.silva@example.com")
    )
    _show("Updated", updated)

    try:
        await service.create(CreateUserRequest(name="Juan Impostor", email="juan@example.com"))
    except UserDomainError as e:
        print(f"Rejected ({e.kind.value}): {e.message}")

    await service.delete(carlos.user_id)
    print(f"Deleted {carlos.user_id}")

    remaining = await service.list_users()
    for user in remaining:
        _show("Remaining", user)

    try:
        await service.get_by_id(carlos.user_id)
    except UserDomainError as e:
        print(f"Rejected ({e.kind.value}): {e.message}")

    return remaining


def main() -> None:
    """Entry point for the ``usercore-demo`` command."""
    config = get_core_config()
    logging.basicConfig(level=config.log_level.upper())
    logger.info("Starting user service demo")
    asyncio.run(run_demo(build_user_service(config)))


if __name__ == "__main__":
    main()
