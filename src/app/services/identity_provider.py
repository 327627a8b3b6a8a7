"""
Identity provider ports.

The console never signs in as the identities it creates: new owner accounts
are created inside a throwaway, non-persistent session so the operator's own
login is never replaced.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from src.domain.entities import OperatorContext


@dataclass(frozen=True)
class IdentityRef:
    """Stable reference to an authentication identity"""

    uid: str
    email: str


class IdentitySession(ABC):
    """Isolated identity-provider client context"""

    @abstractmethod
    async def set_persistence_none(self) -> None:
        """Never write this session's credentials to a durable store"""
        pass

    @abstractmethod
    async def create_identity(self, email: str, password: str) -> IdentityRef:
        """
        Create a login identity.

        Raises:
            EmailAlreadyInUseError: email is already registered
            IdentityProviderError: any other provider failure
        """
        pass

    @abstractmethod
    async def delete_identity(self, identity: IdentityRef) -> None:
        """Delete an identity created by this session"""
        pass

    @abstractmethod
    async def sign_out(self) -> None:
        pass

    @abstractmethod
    async def dispose(self) -> None:
        pass


class IdentityProvider(ABC):
    """Factory for isolated sessions, configured at construction time"""

    @abstractmethod
    async def create_isolated_session(self) -> IdentitySession:
        pass


class AuthAdminClient(ABC):
    """Privileged identity deletion (callable cloud function)"""

    @abstractmethod
    async def delete_auth_identity(self, uid: str, operator: OperatorContext) -> bool:
        """
        Hard-delete an identity by uid.

        Idempotent: an identity that no longer exists counts as deleted.
        """
        pass
