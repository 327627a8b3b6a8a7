"""
Firebase Authentication adapters.

- FirebaseIdentityProvider: Identity Toolkit REST API. Each isolated session
  owns its own HTTP client and keeps the tokens of the identities it creates
  in memory only, so nothing it does touches the operator's login.
- CloudFunctionAuthAdmin: the ``deleteAuthUser`` callable function, used to
  hard-delete identities the console did not create itself.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from src.app.errors import EmailAlreadyInUseError, IdentityProviderError
from src.app.services.identity_provider import (
    AuthAdminClient,
    IdentityProvider,
    IdentityRef,
    IdentitySession,
)
from src.domain.entities import OperatorContext

logger = logging.getLogger(__name__)

DEFAULT_IDENTITY_BASE_URL = "https://identitytoolkit.googleapis.com/v1"


@dataclass(frozen=True)
class IdentityProviderConfig:
    """Connection settings, passed explicitly to the adapters"""

    api_key: str
    base_url: str = DEFAULT_IDENTITY_BASE_URL
    functions_base_url: str = ""
    timeout_seconds: float = 10.0


def _error_message(response: httpx.Response) -> str:
    """Extract the provider's error code, e.g. EMAIL_EXISTS"""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return str(error.get("message") or error.get("status") or error)
    return str(body)


class FirebaseIdentitySession(IdentitySession):
    """One isolated Identity Toolkit client"""

    def __init__(self, config: IdentityProviderConfig, client: httpx.AsyncClient):
        self.config = config
        self.client = client
        self.persistence = "local"
        self._id_tokens: Dict[str, str] = {}

    async def set_persistence_none(self) -> None:
        # Tokens never leave this object; nothing is written to disk
        self.persistence = "none"

    async def _call(self, endpoint: str, payload: Dict[str, Any]) -> httpx.Response:
        url = f"{self.config.base_url.rstrip('/')}/accounts:{endpoint}"
        try:
            return await self.client.post(url, params={"key": self.config.api_key}, json=payload)
        except httpx.HTTPError as exc:
            raise IdentityProviderError(f"Identity provider unreachable: {exc}") from exc

    async def create_identity(self, email: str, password: str) -> IdentityRef:
        response = await self._call(
            "signUp", {"email": email, "password": password, "returnSecureToken": True}
        )
        if response.is_error:
            message = _error_message(response)
            if message.startswith("EMAIL_EXISTS"):
                raise EmailAlreadyInUseError(email)
            raise IdentityProviderError(f"Could not create identity for {email}: {message}")

        body = response.json()
        uid = body.get("localId")
        if not uid:
            raise IdentityProviderError("Could not create user or retrieve UID.")

        self._id_tokens[uid] = body.get("idToken", "")
        logger.info("Created identity uid=%s email=%s", uid, email)
        return IdentityRef(uid=uid, email=body.get("email", email))

    async def delete_identity(self, identity: IdentityRef) -> None:
        id_token = self._id_tokens.get(identity.uid)
        if not id_token:
            raise IdentityProviderError(
                f"Identity {identity.uid} was not created by this session"
            )

        response = await self._call("delete", {"idToken": id_token})
        if response.is_error:
            message = _error_message(response)
            if message.startswith("USER_NOT_FOUND"):
                logger.warning("Identity uid=%s already deleted", identity.uid)
            else:
                raise IdentityProviderError(
                    f"Could not delete identity {identity.uid}: {message}"
                )
        self._id_tokens.pop(identity.uid, None)

    async def sign_out(self) -> None:
        self._id_tokens.clear()

    async def dispose(self) -> None:
        await self.client.aclose()


class FirebaseIdentityProvider(IdentityProvider):
    """Creates FirebaseIdentitySession instances"""

    def __init__(
        self,
        config: IdentityProviderConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.transport = transport

    async def create_isolated_session(self) -> FirebaseIdentitySession:
        client = httpx.AsyncClient(timeout=self.config.timeout_seconds, transport=self.transport)
        return FirebaseIdentitySession(self.config, client)


class CloudFunctionAuthAdmin(AuthAdminClient):
    """Client for the deleteAuthUser callable function"""

    def __init__(
        self,
        config: IdentityProviderConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.transport = transport

    async def delete_auth_identity(self, uid: str, operator: OperatorContext) -> bool:
        if not self.config.functions_base_url:
            raise IdentityProviderError("FUNCTIONS_BASE_URL is not configured")

        url = f"{self.config.functions_base_url.rstrip('/')}/deleteAuthUser"
        headers = {"Authorization": f"Bearer {operator.token}"} if operator.token else {}
        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout_seconds, transport=self.transport
            ) as client:
                response = await client.post(url, headers=headers, json={"data": {"uid": uid}})
        except httpx.HTTPError as exc:
            raise IdentityProviderError(f"deleteAuthUser unreachable: {exc}") from exc

        if response.is_error:
            raise IdentityProviderError(
                f"deleteAuthUser failed for {uid}: {_error_message(response)}"
            )

        result = response.json().get("result") or {}
        logger.info(
            "deleteAuthUser uid=%s by %s: %s", uid, operator.uid, result.get("message", "")
        )
        return bool(result.get("success"))
