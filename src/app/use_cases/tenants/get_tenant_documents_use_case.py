"""
Use Case: Get Tenant Documents

Resolves the applicant's business license and tax id documents.
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Tenant

from .dtos import TenantDocumentsResponse


class GetTenantDocumentsUseCase:
    """
    Documents are stored as sub-documents referenced by path
    (company_doc_ref / tax_doc_ref) holding a content_base64 field.
    Older applications carry the company document inline in
    document_base64.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant: Tenant) -> Result[TenantDocumentsResponse]:
        async with self.uow:
            company = None
            if tenant.company_doc_ref:
                company = await self.uow.tenants.get_document_content(tenant.company_doc_ref)
            elif tenant.document_base64:
                company = tenant.document_base64

            tax = None
            if tenant.tax_doc_ref:
                tax = await self.uow.tenants.get_document_content(tenant.tax_doc_ref)

        return Return.ok(
            TenantDocumentsResponse(
                tenant_id=tenant.id, company_document=company, tax_document=tax
            )
        )
