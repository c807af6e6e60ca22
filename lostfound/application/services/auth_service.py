"""Auth service: password hashing, registration and login pipelines."""

import structlog
from passlib.context import CryptContext
from sqlalchemy.exc import SQLAlchemyError

from lostfound.config import get_settings
from lostfound.core.exceptions import (
    ConflictException,
    DuplicateKeyError,
    InternalException,
    UnauthorizedException,
    ValidationException,
)
from lostfound.domain.models.account import Role
from lostfound.domain.repositories.account_repository import AccountRepository
from lostfound.domain.schemas.auth import LoginRequest, LoginResponse, RegisterRequest

settings = get_settings()
logger = structlog.get_logger(__name__)

BCRYPT_ROUNDS = 10
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)

INVALID_CREDENTIALS = "Invalid username/email or password."
DUPLICATE_MESSAGES = {
    "id": "User ID already exists.",
    "email": "Email already registered.",
}


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored digest.

    A mismatch returns False. A digest passlib cannot parse raises
    ValueError, which callers must treat as a server fault, not a bad login.
    """
    if pwd_context.identify(hashed_password) is None:
        raise ValueError("unrecognised password digest")
    if "\x00" in plain_password:
        # bcrypt cannot hash NUL bytes, so no stored digest can match
        return False
    return pwd_context.verify(plain_password, hashed_password)


def role_for_email(email: str) -> Role:
    """Derive the account role from the email domain."""
    if email.endswith(settings.ADMIN_EMAIL_DOMAIN):
        return Role.ADMIN
    if email.endswith(settings.USER_EMAIL_DOMAIN):
        return Role.USER
    raise ValidationException(
        f"Invalid email domain. Only {settings.ADMIN_EMAIL_DOMAIN} "
        f"or {settings.USER_EMAIL_DOMAIN} are allowed."
    )


def register_account(repo: AccountRepository, body: RegisterRequest) -> Role:
    """Validate, assign a role, hash and persist a new account."""
    if not (body.user_id and body.name and body.email and body.password):
        raise ValidationException("UserID, name, email, and password are required.")

    role = role_for_email(body.email)

    try:
        password_hash = hash_password(body.password)
    except (TypeError, ValueError) as e:
        logger.error("Error hashing password", user_id=body.user_id, error=str(e))
        raise InternalException("Internal server error.")

    try:
        repo.create(
            id=body.user_id,
            name=body.name,
            email=body.email,
            phone_number=body.phone_number or None,
            password_hash=password_hash,
            role=role,
        )
    except DuplicateKeyError as e:
        logger.info("Registration rejected: duplicate key", field=e.field, user_id=body.user_id)
        raise ConflictException(DUPLICATE_MESSAGES[e.field], field=e.field)
    except SQLAlchemyError as e:
        logger.error("DB error during registration", user_id=body.user_id, error=str(e))
        raise InternalException("Error registering user.")

    logger.info("Account registered", user_id=body.user_id, role=role.value)
    return role


def _touch_last_login(repo: AccountRepository, user_id: str) -> None:
    # Bookkeeping only; a failure here must never turn a good login into an error
    try:
        repo.touch_last_login(user_id)
    except SQLAlchemyError as e:
        logger.warning("Could not update LastLogin", user_id=user_id, error=str(e))


def login(repo: AccountRepository, body: LoginRequest) -> LoginResponse:
    """Verify credentials and return the account's public attributes."""
    if not (body.username_or_email and body.password):
        raise ValidationException("Username/email and password are required.")

    try:
        account = repo.find_by_identifier_or_email(body.username_or_email)
    except SQLAlchemyError as e:
        logger.error("DB error during login", error=str(e))
        raise InternalException("Database error during login.")

    if account is None:
        raise UnauthorizedException(INVALID_CREDENTIALS)

    if not account.password_hash:
        logger.error("Account has no password hash", user_id=account.id)
        raise InternalException("Internal server error: incomplete user data.")

    try:
        matched = verify_password(body.password, account.password_hash)
    except (TypeError, ValueError) as e:
        logger.error("Password verification failed", user_id=account.id, error=str(e))
        raise InternalException("Password verification failed.")

    if not matched:
        raise UnauthorizedException(INVALID_CREDENTIALS)

    _touch_last_login(repo, account.id)

    logger.info("Login successful", user_id=account.id)
    return LoginResponse(
        user_id=account.id,
        role=account.role,
        name=account.full_name,
        email=account.email,
    )

