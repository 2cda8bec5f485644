"""Simulated update emails to donors and volunteers."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable

from .activity import ActivityLog
from .config import DEFAULT_EMAIL_DELAY_SECONDS, Settings
from .models import ActivityAction, ActivityCategory, VolunteerStatus

logger = logging.getLogger(__name__)


class UpdateMailer:
    """Pretend to send update emails; each send just waits for the delay."""

    def __init__(
        self,
        delay_seconds: float = DEFAULT_EMAIL_DELAY_SECONDS,
        activity: ActivityLog | None = None,
    ) -> None:
        if delay_seconds < 0:
            raise ValueError("Email delay cannot be negative.")
        self.delay_seconds = delay_seconds
        self.activity = activity

    @classmethod
    def from_settings(cls, settings: Settings, activity: ActivityLog | None = None) -> UpdateMailer:
        return cls(settings.email_delay_seconds, activity)

    def _note(self, description: str, record_id: int | None = None) -> None:
        if self.activity is not None:
            self.activity.record(
                ActivityAction.EMAIL_SENT,
                ActivityCategory.COMMUNICATION,
                description,
                record_id=record_id,
            )

    async def send_update(self, recipient: Any) -> str:
        name = getattr(recipient, "name", "") or "supporter"
        email = getattr(recipient, "email", "")
        if not email:
            raise ValueError(f"{name} has no email address on file.")

        await asyncio.sleep(self.delay_seconds)
        logger.info("Sent update email to %s <%s>.", name, email)
        self._note(f"Update email sent to {name}", getattr(recipient, "id", None))
        return f"Update email sent to {name}."

    async def send_to_active_volunteers(self, volunteers: Iterable[Any]) -> int:
        recipients = [
            volunteer
            for volunteer in volunteers
            if volunteer.status == VolunteerStatus.ACTIVE and volunteer.email
        ]
        await asyncio.sleep(self.delay_seconds)
        logger.info("Sent update email to %s active volunteers.", len(recipients))
        self._note(f"Update email sent to {len(recipients)} active volunteers")
        return len(recipients)
