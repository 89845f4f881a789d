"""Onboarding user domain model."""

from pydantic import BaseModel

from lap_onboarding.models.domain.lap_company import LapRole
from lap_onboarding.utils.domain_check import get_registrable_domain, get_sub_domain_for_user


class OnboardingUser(BaseModel):
    """User being onboarded, with the domains derived from their email."""

    email: str
    lap_role: LapRole | None = None
    sub_domain: str
    tld: str

    class Config:
        """Pydantic config."""

        frozen = True

    @classmethod
    def from_email(cls, email: str, lap_role: LapRole | None = None) -> "OnboardingUser":
        """Build a user from an email address.

        Args:
            email: User email address
            lap_role: Role the user holds in LAP, if known

        Returns:
            OnboardingUser with sub_domain and tld filled in
        """
        sub_domain = get_sub_domain_for_user(email)
        return cls(
            email=email,
            lap_role=lap_role,
            sub_domain=sub_domain,
            tld=get_registrable_domain(sub_domain),
        )
