"""
User Entity

An account profile keyed by its authentication identity uid.
"""

from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import Field

from src.domain.base import DocumentModel

from .enums import UserRole


class User(DocumentModel):
    """
    User entity - profile document whose id is the auth identity uid.

    Business Rules:
    - role changes only through an explicit operator edit
    - is_suspended is independent of role
    - admin_owner users carry barbershop_id of the shop they manage
    - is_deleted hides the profile from listings without removing it
    """

    COLLECTION: ClassVar[str] = "users"

    id: str = ""
    name: str = ""
    email: Optional[str] = None
    role: UserRole = UserRole.customer
    barbershop_id: Optional[str] = None
    phone_number: str = ""
    photo_base64: str = ""
    favorite_barbershops: List[str] = Field(default_factory=list)
    is_suspended: bool = Field(default=False, alias="isSuspended")
    is_deleted: bool = Field(default=False, alias="isDeleted")
    created_at: Optional[datetime] = None
