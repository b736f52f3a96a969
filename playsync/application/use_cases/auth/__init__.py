"""Authentication use cases."""

from .issue_temporary_password_use_case import (
    IssueTemporaryPasswordInput,
    IssueTemporaryPasswordOutput,
    IssueTemporaryPasswordUseCase,
)
from .verify_credential_use_case import (
    VerifyCredentialInput,
    VerifyCredentialOutput,
    VerifyCredentialUseCase,
)

__all__ = [
    "IssueTemporaryPasswordInput",
    "IssueTemporaryPasswordOutput",
    "IssueTemporaryPasswordUseCase",
    "VerifyCredentialInput",
    "VerifyCredentialOutput",
    "VerifyCredentialUseCase",
]
