"""
SQLAlchemy Implementation of Account Repository.
"""

from typing import Optional

from sqlalchemy import func, insert, or_, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from lostfound.core.exceptions import DuplicateKeyError
from lostfound.domain.models.account import Account, Role
from lostfound.domain.repositories.account_repository import AccountRepository
from lostfound.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyAccountRepository(SQLAlchemyRepository[Account], AccountRepository):
    """Account repository implementation using SQLAlchemy."""

    def find_by_identifier_or_email(self, identifier: str) -> Optional[Account]:
        return (
            self.db.query(Account)
            .filter(or_(Account.id == identifier, Account.email == identifier))
            .first()
        )

    def create(
        self,
        id: str,
        name: str,
        email: str,
        phone_number: Optional[str],
        password_hash: str,
        role: Role,
    ) -> None:
        """Insert the account, letting the store's unique keys arbitrate.

        Concurrent registrations race on the INSERT itself. Only once the
        store has rejected the row do we look up which key collides; accounts
        are never deleted, so the colliding row is still there to be found.
        """
        try:
            self.db.execute(
                insert(Account).values(
                    id=id,
                    full_name=name,
                    email=email,
                    phone_number=phone_number,
                    password_hash=password_hash,
                    role=role.value,
                )
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            field = self._duplicate_field(id, email)
            if field is None:
                raise
            raise DuplicateKeyError(field) from None

    def touch_last_login(self, id: str) -> None:
        try:
            self.db.execute(
                update(Account)
                .where(Account.id == id)
                .values(last_login=func.now())
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def _duplicate_field(self, id: str, email: str) -> Optional[str]:
        # Primary key first, matching the order the store checks constraints in
        if self.db.query(Account.id).filter(Account.id == id).first() is not None:
            return "id"
        if self.db.query(Account.id).filter(Account.email == email).first() is not None:
            return "email"
        return None
