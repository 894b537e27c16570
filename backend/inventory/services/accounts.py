import logging
from datetime import UTC, datetime

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from inventory.auth import Identity, TokenService, hash_password, verify_password
from inventory.errors import (
    ConflictError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from inventory.models.user import Role, User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
# bcrypt only hashes the first 72 bytes and newer releases refuse longer input
MAX_PASSWORD_BYTES = 72


def _clean(value: str | None) -> str:
    return value.strip() if value else ""


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


class AccountService:
    """Registration, login and role management over the ``Users`` table."""

    def __init__(self, session: Session, tokens: TokenService):
        self.session = session
        self.tokens = tokens

    def _find_by_email(self, email: str) -> User | None:
        return self.session.exec(select(User).where(User.email == email)).first()

    def _get(self, user_id: int) -> User:
        user = self.session.get(User, user_id)
        if not user:
            raise NotFoundError("User not found", ErrorCode.USER_NOT_FOUND)
        return user

    def _save(self, user: User) -> User:
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as exc:
            # lost a race against a concurrent registration
            self.session.rollback()
            raise ConflictError(
                "This email is already registered. Redirecting to login...",
                ErrorCode.DUPLICATE_EMAIL,
                details={"email": user.email, "error": str(exc.orig)},
            ) from exc
        self.session.refresh(user)
        return user

    def register(
        self,
        first_name: str | None,
        last_name: str | None,
        email: str | None,
        password: str | None,
    ) -> User:
        first_name = _clean(first_name)
        last_name = _clean(last_name)
        email = _clean(email)
        password = _clean(password)

        if not first_name or not last_name or not email or not password:
            raise ValidationError("All fields are required to register.")
        if not is_valid_email(email):
            raise ValidationError(
                "Your email is in an invalid format.", ErrorCode.INVALID_EMAIL
            )
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
            )
        if len(password.encode()) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes long."
            )
        if self._find_by_email(email):
            raise ConflictError(
                "This email is already registered. Redirecting to login...",
                ErrorCode.DUPLICATE_EMAIL,
                details={"email": email},
            )

        user = self._save(
            User(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=hash_password(password),
                role=Role.USER.value,
            )
        )
        logger.info("Registered user %s (id=%s)", user.email, user.id)
        return user

    def login(self, email: str | None, password: str | None) -> tuple[str, User]:
        if not email or not password:
            raise ValidationError("Email and password are required.")

        user = self._find_by_email(email)
        if not user:
            logger.warning("Login attempt for unknown email %s", email)
            raise ValidationError("User does not exist.", ErrorCode.INVALID_CREDENTIALS)
        if not verify_password(password, user.password_hash):
            logger.warning("Incorrect password for user id=%s", user.id)
            raise ValidationError("Incorrect password.", ErrorCode.INVALID_CREDENTIALS)

        token = self.tokens.issue(Identity(id=user.id, email=user.email, role=user.role))
        logger.info("User id=%s logged in", user.id)
        return token, user

    def profile(self, identity: Identity) -> User:
        return self._get(identity.id)

    def logout(self, identity: Identity) -> None:
        # Tokens are stateless; there is nothing to invalidate server-side.
        logger.info("User id=%s logged out", identity.id)

    def list_users(self) -> list[User]:
        return list(self.session.exec(select(User).order_by(User.id)).all())

    def set_role(self, user_id: int, role: str | None) -> User:
        if role not in {r.value for r in Role}:
            raise ValidationError("Invalid role", ErrorCode.INVALID_ROLE)
        user = self._get(user_id)
        user.role = role
        user.updated_at = datetime.now(UTC)
        user = self._save(user)
        logger.info("Role of user id=%s set to %s", user.id, role)
        return user

    def ensure_admin(self, email: str, password: str) -> User:
        """Create the admin account, or promote an existing one. Idempotent."""
        user = self._find_by_email(email)
        if user:
            if user.role != Role.ADMIN.value:
                user.role = Role.ADMIN.value
                user.updated_at = datetime.now(UTC)
                user = self._save(user)
                logger.info("Promoted existing user %s to admin", email)
            return user
        user = self._save(
            User(
                email=email,
                password_hash=hash_password(password),
                role=Role.ADMIN.value,
            )
        )
        logger.info("Seeded admin user %s", email)
        return user
