"""Single Responsibility Principle (SRP).

A class should have only one reason to change.
"""
from __future__ import annotations

import logging
import secrets
import string
from collections.abc import MutableMapping
from datetime import datetime, timezone

from pydantic import BaseModel

from ..display import HEADING

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


class User(BaseModel):
    id: str
    name: str
    email: str


class NewUser(BaseModel):
    """Registration payload; the id is assigned by UserService."""

    name: str
    email: str


# Violates SRP: user bookkeeping, email, persistence and activity logging
# all change for different reasons but live in one class.
class UserManagerBad:
    def __init__(self) -> None:
        self.users: list[User] = []

    def add_user(self, user: User) -> None:
        self.users.append(user)

    def send_welcome_email(self, user: User) -> None:
        logger.info("Sending welcome email to %s", user.email)

    def save_to_database(self, user: User) -> None:
        logger.info("Saving user %s to database", user.name)

    def log_user_activity(self, user: User, activity: str) -> None:
        logger.info("User %s performed: %s", user.name, activity)


class UserManager:
    """In-memory user bookkeeping."""

    def __init__(self) -> None:
        self._users: list[User] = []

    def add_user(self, user: User) -> None:
        self._users.append(user)

    def remove_user(self, user_id: str) -> None:
        self._users = [user for user in self._users if user.id != user_id]

    def get_user(self, user_id: str) -> User | None:
        return next((user for user in self._users if user.id == user_id), None)

    def get_all_users(self) -> list[User]:
        return list(self._users)


class EmailService:
    """Composes and sends user-facing emails."""

    def send_welcome_email(self, user: User) -> None:
        logger.info("Sending welcome email to %s", user.email)
        self._send_email(user.email, "Welcome!", self._welcome_template(user.name))

    def send_password_reset_email(self, user: User) -> None:
        logger.info("Sending password reset email to %s", user.email)

    def _send_email(self, to: str, subject: str, body: str) -> None:
        logger.info("Email sent to %s: %s", to, subject)

    @staticmethod
    def _welcome_template(name: str) -> str:
        return f"Hello {name}, welcome to our platform!"


class UserRepository:
    """User persistence backed by a mapping (an in-memory dict by default)."""

    def __init__(self, rows: MutableMapping[str, User] | None = None) -> None:
        self._rows: MutableMapping[str, User] = rows if rows is not None else {}

    async def save_user(self, user: User) -> None:
        logger.info("Saving user %s to database", user.name)
        try:
            self._rows[user.id] = user.model_copy()
        except Exception:
            logger.exception("Error saving user %s", user.id)
            raise
        logger.info("User saved successfully")

    async def get_user_by_id(self, user_id: str) -> User | None:
        logger.info("Fetching user with id: %s", user_id)
        row = self._rows.get(user_id)
        return row.model_copy() if row is not None else None

    async def update_user(self, user: User) -> None:
        logger.info("Updating user %s", user.name)
        if user.id in self._rows:
            self._rows[user.id] = user.model_copy()

    async def delete_user(self, user_id: str) -> None:
        logger.info("Deleting user with id: %s", user_id)
        self._rows.pop(user_id, None)


class ActivityLogger:
    """Keeps a timestamped audit trail of user and system activity."""

    def __init__(self) -> None:
        self._logs: list[str] = []

    def log_user_activity(self, user: User, activity: str) -> None:
        self._record(f"User {user.name} ({user.id}) performed: {activity}")

    def log_system_activity(self, activity: str) -> None:
        self._record(f"System: {activity}")

    def _record(self, text: str) -> None:
        timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
        entry = f"[{timestamp}] {text}"
        self._logs.append(entry)
        logger.info(entry)

    def get_logs(self) -> list[str]:
        return list(self._logs)

    def clear_logs(self) -> None:
        self._logs = []


class UserService:
    """Coordinates registration; each collaborator keeps its own responsibility."""

    def __init__(
        self,
        user_manager: UserManager,
        email_service: EmailService,
        user_repository: UserRepository,
        activity_logger: ActivityLogger,
    ) -> None:
        self.user_manager = user_manager
        self.email_service = email_service
        self.user_repository = user_repository
        self.activity_logger = activity_logger

    async def register_user(self, user_data: NewUser) -> User:
        user = User(id=generate_user_id(), **user_data.model_dump())

        self.user_manager.add_user(user)
        await self.user_repository.save_user(user)
        self.email_service.send_welcome_email(user)
        self.activity_logger.log_user_activity(user, "User registered")

        return user


def generate_user_id(length: int = 9) -> str:
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


async def demonstrate_srp() -> None:
    logger.info("Single Responsibility Principle", extra=HEADING)

    logger.info("--- Without SRP ---")
    bad = UserManagerBad()
    someone = User(id="legacy-1", name="Jane Roe", email="jane@example.com")
    bad.add_user(someone)
    bad.save_to_database(someone)
    bad.send_welcome_email(someone)
    bad.log_user_activity(someone, "User registered")

    logger.info("--- With SRP ---")
    user_service = UserService(
        UserManager(),
        EmailService(),
        UserRepository(),
        ActivityLogger(),
    )
    user = await user_service.register_user(NewUser(name="John Doe", email="john@example.com"))
    logger.info("Registered %s with id %s", user.name, user.id)
