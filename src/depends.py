from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.models.stored_document import StoredDocument  # noqa: F401
from src.adapter.services.firebase_identity import (
    CloudFunctionAuthAdmin,
    FirebaseIdentityProvider,
    IdentityProviderConfig,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.app.services.identity_provider import AuthAdminClient
from src.app.services.identity_provisioner import IdentityProvisioner
from src.domain.entities import OperatorContext, UserRole

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()

identity_config = IdentityProviderConfig(
    api_key=ApplicationConfig.IDENTITY_API_KEY,
    base_url=ApplicationConfig.IDENTITY_BASE_URL,
    functions_base_url=ApplicationConfig.FUNCTIONS_BASE_URL,
    timeout_seconds=ApplicationConfig.IDENTITY_TIMEOUT_SECONDS,
)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_identity_provisioner() -> IdentityProvisioner:
    return IdentityProvisioner(FirebaseIdentityProvider(identity_config))


def get_auth_admin() -> AuthAdminClient:
    return CloudFunctionAuthAdmin(identity_config)


async def get_current_operator(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    x_identity_token: Optional[str] = Header(default=None),
) -> OperatorContext:
    """
    Dependency to extract the operator from the JWT in the Authorization header.

    X-Identity-Token optionally carries the operator's identity-provider ID
    token, forwarded to privileged cloud functions.

    Raises:
        HTTPException: 401 if token is invalid, expired or missing claims
    """
    payload = verify_jwt(credentials.credentials)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        role = UserRole(payload.get("role"))
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token claims",
        )

    if not payload.get("uid"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token claims",
        )

    return OperatorContext(
        uid=payload["uid"],
        email=payload.get("email", ""),
        role=role,
        token=x_identity_token or "",
    )


async def get_super_admin(
    operator: OperatorContext = Depends(get_current_operator),
) -> OperatorContext:
    """Dependency for read endpoints restricted to super admins"""
    if not operator.is_super_admin:
        raise ClientError(
            Error("INSUFFICIENT_ROLE", "Super admin access required"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return operator
