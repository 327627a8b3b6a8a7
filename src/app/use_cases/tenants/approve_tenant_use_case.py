"""
Use Case: Approve Tenant & Provision

Turns a pending application into a working tenant:
1. Auth identity for the owner (isolated session)
2. Barbershop document with starter defaults
3. User profile (role admin_owner) linked to the shop
4. Tenant update (active, verified, credentials injected, history)
5. Notification to the applicant's original account

Steps 2-5 are one atomic batch. If anything fails after the identity was
created, the identity is deleted again so the approval can be retried.
"""

import logging

from libs.result import Error, Result, Return
from src.app.errors import EmailAlreadyInUseError, PreconditionFailedError
from src.app.services.document_store import SERVER_TIMESTAMP
from src.app.services.identity_provider import IdentityRef
from src.app.services.identity_provisioner import IdentityProvisioner, generate_password
from src.app.services.transitions import stage_notification, stage_transition
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.authorization import require_super_admin
from src.domain.entities import Barbershop, OperatorContext, Tenant, User, UserRole
from src.domain.entities.barbershop import DEFAULT_ADDRESS
from src.domain.lifecycle import TenantLifecycle, TransitionPlan

from .dtos import ApproveTenantResponse

logger = logging.getLogger(__name__)


class ApproveTenantUseCase:
    """
    Approve a pending tenant and provision its infrastructure.

    Business Logic:
    1. Validate operator, status (pending review) and payment proof
    2. Generate 8-char alphanumeric password and new shop id
    3. Create auth identity in an isolated, non-persistent session
    4. Stage shop, user, tenant update and notification in one batch
    5. Commit; on failure delete the identity and surface the error
    6. Always dispose the isolated session

    Errors:
        - INSUFFICIENT_ROLE: operator is not a super admin
        - INVALID_STATUS: tenant is not pending review
        - PAYMENT_PROOF_REQUIRED: no proof image / url
        - EMAIL_ALREADY_IN_USE: owner email already has an identity
        - TENANT_STATE_CHANGED: tenant was modified concurrently

    Raises:
        InfrastructureError: identity provider or document store failure
    """

    def __init__(
        self,
        uow: UnitOfWork,
        provisioner: IdentityProvisioner,
        lifecycle: TenantLifecycle = None,
    ):
        self.uow = uow
        self.provisioner = provisioner
        self.lifecycle = lifecycle or TenantLifecycle()

    async def execute(
        self, operator: OperatorContext, tenant: Tenant
    ) -> Result[ApproveTenantResponse]:
        denied = require_super_admin(operator)
        if denied:
            return denied

        password = generate_password()
        shop_id = self.uow.new_id()
        planned = self.lifecycle.approve(
            tenant,
            shop_id=shop_id,
            admin_email=tenant.owner_email,
            temp_password=password,
        )
        if planned.is_err():
            return planned
        plan = planned.value

        logger.info(
            "Provisioning tenant=%s business=%s by operator=%s",
            tenant.id,
            tenant.business_name,
            operator.uid,
        )

        async with self.uow:
            async with self.provisioner.isolated_session() as session:
                try:
                    identity = await session.create_identity(tenant.owner_email, password)
                except EmailAlreadyInUseError as exc:
                    logger.warning("Provisioning refused for tenant=%s: %s", tenant.id, exc)
                    return Return.err(Error("EMAIL_ALREADY_IN_USE", exc.message))

                logger.info("Auth identity created uid=%s", identity.uid)

                try:
                    await self._commit(tenant, plan, identity, password)
                except PreconditionFailedError as exc:
                    logger.warning("Tenant %s changed during provisioning: %s", tenant.id, exc)
                    await self.provisioner.rollback(session, identity)
                    return Return.err(
                        Error(
                            "TENANT_STATE_CHANGED",
                            "Tenant was modified by another operator; reload and retry",
                        )
                    )
                except Exception:
                    logger.error("Provisioning failed for tenant=%s", tenant.id, exc_info=True)
                    await self.provisioner.rollback(session, identity)
                    raise

        logger.info("Provisioning succeeded tenant=%s shop=%s", tenant.id, shop_id)
        return Return.ok(
            ApproveTenantResponse(
                tenant_id=tenant.id,
                shop_id=shop_id,
                owner_id=identity.uid,
                generated_password=password,
            )
        )

    async def _commit(
        self, tenant: Tenant, plan: TransitionPlan, identity: IdentityRef, password: str
    ) -> None:
        shop_id = plan.updates["shop_id"]
        batch = self.uow.batch()

        # A. Barbershop with starter defaults
        shop = Barbershop(
            id=shop_id,
            name=tenant.business_name,
            address=tenant.address or DEFAULT_ADDRESS,
            whatsapp_number=tenant.owner_phone or "",
            admin_uid=identity.uid,
        )
        shop_data = shop.to_document()
        shop_data["created_at"] = SERVER_TIMESTAMP
        batch.set(Barbershop.document_path(shop_id), shop_data)

        # B. Owner profile keyed by the new identity
        owner = User(
            id=identity.uid,
            name=tenant.owner_name,
            email=tenant.owner_email,
            role=UserRole.admin_owner,
            barbershop_id=shop_id,
            phone_number=tenant.owner_phone or "",
        )
        owner_data = owner.to_document()
        owner_data["created_at"] = SERVER_TIMESTAMP
        batch.set(User.document_path(identity.uid), owner_data)

        # C. Tenant: active, verified, credentials injected
        stage_transition(batch, tenant, plan)

        # D. Notification to the applicant's original account
        stage_notification(
            batch,
            self.uow.new_id(),
            user_id=tenant.owner_uid,
            title="Pendaftaran Disetujui! 🚀",
            body=(
                f'Selamat! Barbershop "{tenant.business_name}" telah aktif.\n\n'
                f"Silakan login ke aplikasi OWNER dengan:\n"
                f"Email: {tenant.owner_email}\n"
                f"Password: {password}"
            ),
        )

        await batch.commit()
