from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session

from inventory.auth import Identity, TokenService
from inventory.config import settings
from inventory.database import get_session
from inventory.errors import AuthenticationError, AuthorizationError, ErrorCode
from inventory.models.user import Role
from inventory.services.accounts import AccountService
from inventory.services.products import ProductService

# auto_error=False so a missing or non-Bearer header reaches our own 401
security = HTTPBearer(auto_error=False)


def get_token_service() -> TokenService:
    return TokenService(
        settings.secret_key,
        expire_minutes=settings.access_token_expire_minutes,
        algorithm=settings.jwt_algorithm,
    )


def get_account_service(
    session: Session = Depends(get_session),
    tokens: TokenService = Depends(get_token_service),
) -> AccountService:
    return AccountService(session, tokens)


def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return ProductService(session)


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("No token provided. Please log in.")
    verification = tokens.verify(credentials.credentials)
    if not verification.ok:
        raise AuthenticationError(
            "Invalid or expired token.",
            ErrorCode.INVALID_TOKEN,
            details={"reason": verification.error.value},
        )
    return verification.identity


async def get_admin_identity(
    identity: Identity = Depends(get_current_identity),
) -> Identity:
    if identity.role != Role.ADMIN.value:
        raise AuthorizationError(
            "Unauthorized: Admins only",
            details={"user_id": identity.id, "role": identity.role},
        )
    return identity
