"""Notifier port and a simulated email implementation."""

import asyncio
import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import UTC, datetime

from usercore.models.user import User

logger = logging.getLogger(__name__)


class NotificationError(Exception):
    """A notification could not be delivered."""


class Notifier(ABC):
    """Abstract interface for user notifications. Sends may fail."""

    @abstractmethod
    async def send_welcome(self, user: User) -> None:
        """Send a welcome message to a newly created user."""
        pass

    @abstractmethod
    async def send_update_notice(self, user: User) -> None:
        """Tell a user their profile changed."""
        pass


@dataclass(frozen=True)
class SentNotification:
    """Record of a delivered simulated email."""

    kind: str
    user_id: str
    email: str
    subject: str
    sent_at: datetime


class SimulatedEmailNotifier(Notifier):
    """Notifier that pretends to send email after a short delay."""

    def __init__(
        self,
        sender: str = "no-reply@example.com",
        delay_seconds: float = 0.1,
        failure_rate: float = 0.0,
        timeout_seconds: float | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the simulated notifier.

        Args:
            sender: From address shown in the simulated messages
            delay_seconds: Simulated transport latency
            failure_rate: Probability (0-1) that a send raises NotificationError
            timeout_seconds: Upper bound for a single send, None for no bound
            rng: Random source, injectable for deterministic failures
        """
        if not 0.0 <= failure_rate <= 1.0:
            raise ValueError("failure_rate must be between 0 and 1")

        self.sender = sender
        self.delay_seconds = delay_seconds
        self.failure_rate = failure_rate
        self.timeout_seconds = timeout_seconds
        self._rng = rng or random.Random()
        self.sent: list[SentNotification] = []

    async def send_welcome(self, user: User) -> None:
        await self._send("welcome", user, f"Welcome, {user.name}!")

    async def send_update_notice(self, user: User) -> None:
        await self._send("update", user, "Your profile was updated")

    async def _send(self, kind: str, user: User, subject: str) -> None:
        try:
            await asyncio.wait_for(self._deliver(kind, user, subject), timeout=self.timeout_seconds)
        except TimeoutError as e:
            raise NotificationError(f"{kind} email to {user.email} timed out") from e

    async def _deliver(self, kind: str, user: User, subject: str) -> None:
        await asyncio.sleep(self.delay_seconds)
        if self.failure_rate and self._rng.random() < self.failure_rate:
            raise NotificationError(f"could not deliver {kind} email to {user.email}")

        self.sent.append(
            SentNotification(
                kind=kind,
                user_id=user.user_id,
                email=user.email,
                subject=subject,
                sent_at=datetime.now(UTC),
            )
        )
        logger.info("Email sent from %s to %s: %s", self.sender, user.email, subject)
