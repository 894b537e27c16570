from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import StrEnum

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from inventory.config import settings


def hash_password(password: str, rounds: int | None = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode(), salt).decode()


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode(), hashed.encode())
    except ValueError:
        # stored value is not a bcrypt hash
        return False


@dataclass(frozen=True)
class Identity:
    id: int
    email: str
    role: str


class TokenError(StrEnum):
    INVALID = "invalid"
    EXPIRED = "expired"
    MALFORMED_CLAIMS = "malformed_claims"


@dataclass(frozen=True)
class Verification:
    identity: Identity | None = None
    error: TokenError | None = None

    @property
    def ok(self) -> bool:
        return self.identity is not None


class TokenService:
    """Issues and verifies stateless bearer tokens.

    Tokens carry ``id``, ``email`` and ``role`` plus ``iat``/``exp`` and are
    signed with ``secret_key``. There is no server-side record of issued
    tokens, so a token stays valid until it expires.
    """

    def __init__(
        self,
        secret_key: str,
        expire_minutes: int = 60,
        algorithm: str = "HS256",
    ):
        self.secret_key = secret_key
        self.expire_minutes = expire_minutes
        self.algorithm = algorithm

    def issue(self, identity: Identity) -> str:
        now = datetime.now(UTC)
        return jwt.encode(
            {
                "id": identity.id,
                "email": identity.email,
                "role": identity.role,
                "iat": now,
                "exp": now + timedelta(minutes=self.expire_minutes),
            },
            self.secret_key,
            algorithm=self.algorithm,
        )

    def verify(self, token: str) -> Verification:
        """Check signature and expiry; failures come back as ``Verification.error``."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            return Verification(error=TokenError.EXPIRED)
        except JWTError:
            return Verification(error=TokenError.INVALID)

        user_id = payload.get("id")
        email = payload.get("email")
        role = payload.get("role")
        if (
            not isinstance(user_id, int)
            or isinstance(user_id, bool)
            or not isinstance(email, str)
            or not isinstance(role, str)
        ):
            return Verification(error=TokenError.MALFORMED_CLAIMS)
        return Verification(identity=Identity(id=user_id, email=email, role=role))
