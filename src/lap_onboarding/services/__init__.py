"""Services package."""

from lap_onboarding.services.lap_company_service import (
    LapCompanyService,
    get_lap_company_for_user,
    get_lap_company_tlds,
)

__all__ = [
    "LapCompanyService",
    "get_lap_company_for_user",
    "get_lap_company_tlds",
]
