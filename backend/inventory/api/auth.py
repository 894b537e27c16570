from fastapi import APIRouter, Depends

from inventory.api.deps import get_account_service, get_current_identity
from inventory.api.schemas import CamelModel, MessageResponse, UserResponse
from inventory.auth import Identity
from inventory.services.accounts import AccountService

router = APIRouter(tags=["auth"])


class RegisterRequest(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None


class RegisterResponse(MessageResponse):
    redirect_url: str


class LoginRequest(CamelModel):
    email: str | None = None
    password: str | None = None


class LoginUser(CamelModel):
    first_name: str | None
    last_name: str | None
    email: str


class LoginResponse(MessageResponse):
    token: str
    user: LoginUser


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    body: RegisterRequest,
    accounts: AccountService = Depends(get_account_service),
):
    accounts.register(body.first_name, body.last_name, body.email, body.password)
    return RegisterResponse(
        message="Registration successful. Redirecting to login...",
        redirect_url="/login",
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    accounts: AccountService = Depends(get_account_service),
):
    token, user = accounts.login(body.email, body.password)
    return LoginResponse(
        message="Login successful.",
        token=token,
        user=LoginUser(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        ),
    )


@router.get("/profile", response_model=UserResponse)
async def profile(
    identity: Identity = Depends(get_current_identity),
    accounts: AccountService = Depends(get_account_service),
):
    return accounts.profile(identity)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    identity: Identity = Depends(get_current_identity),
    accounts: AccountService = Depends(get_account_service),
):
    accounts.logout(identity)
    return MessageResponse(message="Logged out successfully.")
