"""
User Management Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel


class ChangeRoleCommand(BaseModel):
    role: str


class UserSuspensionCommand(BaseModel):
    suspended: bool
    reason: str = ""


class UserInfo(BaseModel):
    """Row in the user listing"""

    id: str
    name: str
    email: Optional[str] = None
    role: str
    barbershop_id: Optional[str] = None
    phone_number: str = ""
    is_suspended: bool = False
    created_at: Optional[str] = None


class UserListResponse(BaseModel):
    items: List[UserInfo]
    total: int


class ChangeRoleResponse(BaseModel):
    user_id: str
    old_role: str
    new_role: str


class UserSuspensionResponse(BaseModel):
    user_id: str
    is_suspended: bool
    shop_id: Optional[str] = None
    tenants_updated: List[str] = []


class DeleteUserResponse(BaseModel):
    user_id: str
    auth_deleted: bool
