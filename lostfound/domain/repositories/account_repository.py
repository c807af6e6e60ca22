"""
Account Repository Interface.
Defines the data access operations of the user directory.
"""

from typing import Optional, Protocol

from lostfound.domain.models.account import Account, Role


class AccountRepository(Protocol):
    """Interface for Account-specific operations."""

    def find_by_identifier_or_email(self, identifier: str) -> Optional[Account]:
        """Get the account whose id or email equals ``identifier``."""
        ...

    def create(
        self,
        id: str,
        name: str,
        email: str,
        phone_number: Optional[str],
        password_hash: str,
        role: Role,
    ) -> None:
        """Insert an account; raises DuplicateKeyError on a taken id or email."""
        ...

    def touch_last_login(self, id: str) -> None:
        """Stamp the account's last login with the store's current time."""
        ...
