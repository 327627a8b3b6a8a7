from typing import Optional

from libs.result import Error, Result, Return
from src.domain.entities import OperatorContext


def require_super_admin(operator: OperatorContext) -> Optional[Result]:
    """Return an error result unless the operator is a super admin"""
    if not operator.is_super_admin:
        return Return.err(
            Error(
                "INSUFFICIENT_ROLE",
                "Only super admins can manage tenants, barbershops and users",
            )
        )
    return None
