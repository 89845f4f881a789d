"""Domain models package."""

from lap_onboarding.models.domain.lap_company import (
    LapCompany,
    LapCompanyUser,
    LapRole,
    LapUserCompanyAssociation,
)
from lap_onboarding.models.domain.onboarding_user import OnboardingUser

__all__ = [
    "LapCompany",
    "LapCompanyUser",
    "LapRole",
    "LapUserCompanyAssociation",
    "OnboardingUser",
]
