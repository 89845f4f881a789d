"""Domain-specific exceptions for LAP onboarding.

The four association errors carry fixed messages. The calling onboarding flow
branches on their "Error 19-x" prefixes, so the text must not change.
"""

from typing import Any


class LapOnboardingError(Exception):
    """Base exception for all LAP onboarding errors."""

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(LapOnboardingError):
    """Base class for validation errors."""

    pass


class LapPayloadError(ValidationError):
    """Raised when a LAP API payload does not have the expected shape."""

    def __init__(self, errors: list[dict[str, Any]] | None = None) -> None:
        details = {"errors": errors} if errors else {}
        super().__init__("LAP company payload is malformed", details)


# =============================================================================
# Company Association Errors
# =============================================================================


class LapAssociationError(LapOnboardingError):
    """Base class for ambiguous or untrusted LAP company associations.

    These are data-consistency conditions in the LAP directory that a human
    has to reconcile. They are deterministic, so retrying is pointless until
    the upstream data changes.
    """

    code: str = ""
    reason: str = ""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Error {self.code}: {self.reason}", details)


class MultipleAdminAssociationsError(LapAssociationError):
    """Raised when the user is an administrator of more than one company."""

    code = "19-1"
    reason = "User has multiple LAP company associations as ADMIN"

    def __init__(self, company_ids: list[int] | None = None) -> None:
        super().__init__({"company_ids": company_ids} if company_ids else None)


class MultipleStandardAssociationsError(LapAssociationError):
    """Raised when standard memberships do not narrow down to one trusted company."""

    code = "19-2"
    reason = "User has multiple LAP company associations as STANDARD"

    def __init__(
        self,
        company_ids: list[int] | None = None,
        valid_company_ids: list[int] | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if company_ids:
            details["company_ids"] = company_ids
        if valid_company_ids is not None:
            details["valid_company_ids"] = valid_company_ids
        super().__init__(details)


class CompanyDomainMismatchError(LapAssociationError):
    """Base class for a single association whose company has foreign TLDs."""

    def __init__(self, company_id: int | None = None, foreign_tlds: list[str] | None = None) -> None:
        details: dict[str, Any] = {}
        if company_id is not None:
            details["company_id"] = company_id
        if foreign_tlds is not None:
            details["foreign_tlds"] = foreign_tlds
        super().__init__(details)


class AdminCompanyDomainMismatchError(CompanyDomainMismatchError):
    """Raised when the user's single admin company has TLDs the root account lacks."""

    code = "19-3"
    reason = (
        "User has one LAP company association as ADMIN but that company "
        "has foreign TLDs not in the root account's TLDs"
    )


class StandardCompanyDomainMismatchError(CompanyDomainMismatchError):
    """Raised when the user's single standard company has TLDs the root account lacks."""

    code = "19-4"
    reason = (
        "User has one LAP company association as STANDARD but that company "
        "has foreign TLDs not in the root account's TLDs"
    )
