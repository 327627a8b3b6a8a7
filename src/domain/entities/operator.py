"""
Operator Context

The authenticated console operator on whose behalf a use case runs.
Passed explicitly into every operation that needs to know the actor.
"""

from dataclasses import dataclass

from .enums import UserRole


@dataclass(frozen=True)
class OperatorContext:
    uid: str
    email: str
    role: UserRole
    token: str = ""

    @property
    def is_super_admin(self) -> bool:
        return self.role == UserRole.super_admin
