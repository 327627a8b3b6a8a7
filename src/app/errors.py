"""
Infrastructure exceptions.

Business-rule failures are reported through ``libs.result.Error``; the
exceptions below signal that an external system (document store, identity
provider) failed and the operation did not complete.
"""


class InfrastructureError(Exception):
    code = "INFRASTRUCTURE_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DocumentStoreError(InfrastructureError):
    code = "DOCUMENT_STORE_ERROR"


class DocumentNotFoundError(DocumentStoreError):
    code = "DOCUMENT_NOT_FOUND"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No document to update: {path}")


class PreconditionFailedError(DocumentStoreError):
    """A conditional write found the document in an unexpected state."""

    code = "PRECONDITION_FAILED"

    def __init__(self, path: str, field: str, expected, actual):
        self.path = path
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{path}: expected {field}={expected!r} but found {actual!r}"
        )


class IdentityProviderError(InfrastructureError):
    code = "IDENTITY_PROVIDER_ERROR"


class EmailAlreadyInUseError(IdentityProviderError):
    code = "EMAIL_ALREADY_IN_USE"

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email {email} is already registered. Use another email.")
