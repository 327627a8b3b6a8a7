"""
Identity Provisioner

Creates and rolls back owner identities inside an isolated session.
"""

import logging
import secrets
import string
from contextlib import asynccontextmanager
from typing import AsyncIterator

from src.app.services.identity_provider import (
    IdentityProvider,
    IdentityRef,
    IdentitySession,
)

logger = logging.getLogger(__name__)

PASSWORD_ALPHABET = string.ascii_letters + string.digits
PASSWORD_LENGTH = 8


def generate_password(length: int = PASSWORD_LENGTH) -> str:
    """Random alphanumeric credential for a newly provisioned owner"""
    return "".join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))


class IdentityProvisioner:
    """
    Wraps an IdentityProvider with the isolated-session lifecycle.

    Usage:
        async with provisioner.isolated_session() as session:
            identity = await session.create_identity(email, password)
            ...

    The session is created with persistence disabled and is always signed
    out and disposed on exit, whether or not the body raised. Teardown
    failures are logged and never replace the outcome of the body.
    """

    def __init__(self, provider: IdentityProvider):
        self.provider = provider

    @asynccontextmanager
    async def isolated_session(self) -> AsyncIterator[IdentitySession]:
        session = await self.provider.create_isolated_session()
        try:
            await session.set_persistence_none()
            yield session
        finally:
            await self._teardown(session)

    async def _teardown(self, session: IdentitySession) -> None:
        try:
            await session.sign_out()
        except Exception:
            logger.error("Isolated identity session sign-out failed", exc_info=True)
        try:
            await session.dispose()
        except Exception:
            logger.error("Isolated identity session dispose failed", exc_info=True)
        else:
            logger.info("Isolated identity session disposed")

    async def rollback(self, session: IdentitySession, identity: IdentityRef) -> bool:
        """
        Delete an identity whose provisioning did not complete.

        Returns True when the identity is gone. A failure is logged as
        critical with the uid, since the orphan blocks any retry with the
        same email until it is removed by hand.
        """
        try:
            await session.delete_identity(identity)
        except Exception:
            logger.critical(
                "ORPHAN IDENTITY: rollback failed for uid=%s email=%s; manual cleanup required",
                identity.uid,
                identity.email,
                exc_info=True,
            )
            return False

        logger.warning(
            "Rolled back identity uid=%s email=%s", identity.uid, identity.email
        )
        return True
