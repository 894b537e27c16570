from fastapi import APIRouter, Depends

from inventory.api.deps import get_account_service, get_admin_identity
from inventory.api.schemas import CamelModel, MessageResponse, UserResponse
from inventory.auth import Identity
from inventory.services.accounts import AccountService

router = APIRouter(prefix="/users", tags=["users"])


class SetRoleRequest(CamelModel):
    role: str | None = None


@router.get("", response_model=list[UserResponse])
async def list_users(
    accounts: AccountService = Depends(get_account_service),
    _admin: Identity = Depends(get_admin_identity),
):
    return accounts.list_users()


@router.put("/{user_id}/role", response_model=MessageResponse)
async def set_role(
    user_id: int,
    body: SetRoleRequest,
    accounts: AccountService = Depends(get_account_service),
    _admin: Identity = Depends(get_admin_identity),
):
    user = accounts.set_role(user_id, body.role)
    return MessageResponse(message=f"User role updated to {user.role}")
