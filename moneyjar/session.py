"""Session holder: who is logged in.

Stores and aggregations never look at the session; categories and money
records are global rather than per user.
"""

from collections.abc import Sequence
from pathlib import Path

from moneyjar.config import get_users
from moneyjar.domain.models import User
from moneyjar.store.slots import Slot, SqliteSlot

USER_KEY = "user"


class UserNotFoundError(LookupError):
    """No configured user has the given email."""


def find_user_by_email(users: Sequence[User], email: str) -> User:
    """Look up a user by exact (case-sensitive) email.

    Args:
        users: Users directory.
        email: Email to look for.

    Returns:
        Matching user.

    Raises:
        UserNotFoundError: If no user has that email.
    """
    for user in users:
        if user.email == email:
            return user
    raise UserNotFoundError("User does not exist")


class Session:
    """Current user, restored from and saved to a slot."""

    def __init__(self, users: Sequence[User], slot: Slot) -> None:
        self.users = list(users)
        self._slot = slot
        stored = slot.load()
        self.current_user = User.from_dict(stored) if stored else None

    def login(self, email: str) -> User:
        """Log in as the user with the given email.

        Raises:
            UserNotFoundError: If no user has that email.
        """
        user = find_user_by_email(self.users, email)
        self.current_user = user
        self._slot.save(user.to_dict())
        return user

    def logout(self) -> None:
        self.current_user = None
        self._slot.clear()


def open_session(db_path: Path | None = None, config_path: Path | None = None) -> Session:
    """Open the session using the configured users directory.

    Args:
        db_path: Path to the database file. If None, uses default location.
        config_path: Path to config file. If None, uses default location.
    """
    users = [User.from_dict(user) for user in get_users(config_path)]
    return Session(users, SqliteSlot(USER_KEY, db_path))
