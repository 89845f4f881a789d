"""LAP company association resolution for user onboarding."""

from lap_onboarding.exceptions import (
    AdminCompanyDomainMismatchError,
    LapAssociationError,
    LapOnboardingError,
    LapPayloadError,
    MultipleAdminAssociationsError,
    MultipleStandardAssociationsError,
    StandardCompanyDomainMismatchError,
)
from lap_onboarding.models.domain import (
    LapCompany,
    LapCompanyUser,
    LapRole,
    LapUserCompanyAssociation,
    OnboardingUser,
)
from lap_onboarding.services import (
    LapCompanyService,
    get_lap_company_for_user,
    get_lap_company_tlds,
)

__all__ = [
    "AdminCompanyDomainMismatchError",
    "LapAssociationError",
    "LapCompany",
    "LapCompanyService",
    "LapCompanyUser",
    "LapOnboardingError",
    "LapPayloadError",
    "LapRole",
    "LapUserCompanyAssociation",
    "MultipleAdminAssociationsError",
    "MultipleStandardAssociationsError",
    "OnboardingUser",
    "StandardCompanyDomainMismatchError",
    "get_lap_company_for_user",
    "get_lap_company_tlds",
]
