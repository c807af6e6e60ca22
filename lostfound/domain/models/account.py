"""Account domain model: maps to the 'student_staff' table."""

import enum

from sqlalchemy import Column, String, DateTime

from lostfound.infrastructure.database import Base


class Role(str, enum.Enum):
    ADMIN = "Admin"
    USER = "User"


class Account(Base):
    __tablename__ = "student_staff"

    id = Column("UserID", String(50), primary_key=True)
    full_name = Column("FullName", String(200), nullable=False)
    email = Column("Email", String(255), unique=True, nullable=False, index=True)
    phone_number = Column("PhoneNumber", String(20), nullable=True)
    password_hash = Column("PasswordHash", String(255), nullable=True)
    role = Column("Role", String(20), nullable=False, default=Role.USER.value)
    last_login = Column("LastLogin", DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Account {self.id} - {self.email}>"
