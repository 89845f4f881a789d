"""LAP company association service.

Decides which single LAP company, if any, a user being onboarded belongs to.
Resolution is a pure function of the LAP company list, the user's email and
the TLDs trusted by the user's root account:

- No ADMIN or STANDARD membership anywhere: None (new user).
- ADMIN memberships take precedence over STANDARD ones.
- The chosen company's admin TLDs must all be trusted by the root account.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from lap_onboarding.exceptions import (
    AdminCompanyDomainMismatchError,
    LapAssociationError,
    LapPayloadError,
    MultipleAdminAssociationsError,
    MultipleStandardAssociationsError,
    StandardCompanyDomainMismatchError,
)
from lap_onboarding.models.domain.lap_company import (
    LapCompany,
    LapRole,
    LapUserCompanyAssociation,
)
from lap_onboarding.utils.domain_check import get_domain_for_email
from lap_onboarding.utils.secure_logging import log_error, log_warning, mask_email

logger = logging.getLogger(__name__)

_companies_adapter = TypeAdapter(list[LapCompany])


def get_lap_company_tlds(company: LapCompany) -> list[str]:
    """Get the distinct TLDs used by a company's administrators.

    Standard and other members are ignored. The list keeps first-occurrence
    order. A company without administrators yields an empty list, and one
    whose administrators span several TLDs yields all of them.

    Args:
        company: LAP company record

    Returns:
        Distinct admin TLDs
    """
    tlds: dict[str, None] = {}
    for user in company.users:
        if user.role is LapRole.ADMIN:
            tlds.setdefault(get_domain_for_email(user.email), None)
    return list(tlds)


def get_foreign_tlds(company: LapCompany, root_account_tlds: Iterable[str]) -> list[str]:
    """Get the company's admin TLDs that the root account does not trust."""
    trusted = set(root_account_tlds)
    return [tld for tld in get_lap_company_tlds(company) if tld not in trusted]


def all_company_tlds_trusted(company: LapCompany, root_account_tlds: Iterable[str]) -> bool:
    """Check that a company has admin TLDs and every one of them is trusted."""
    trusted = set(root_account_tlds)
    company_tlds = get_lap_company_tlds(company)
    return len(company_tlds) > 0 and all(tld in trusted for tld in company_tlds)


def get_lap_company_for_user(
    companies: Sequence[LapCompany],
    user_email: str,
    root_account_tlds: Iterable[str],
) -> LapUserCompanyAssociation | None:
    """Resolve the LAP company a user should be associated with.

    Args:
        companies: LAP companies, in the order LAP returned them
        user_email: Email of the user being onboarded (matched case-sensitively)
        root_account_tlds: TLDs trusted by the user's root account

    Returns:
        The association, or None if the user has no ADMIN or STANDARD membership

    Raises:
        MultipleAdminAssociationsError: User is ADMIN of more than one company
        AdminCompanyDomainMismatchError: The single ADMIN company has foreign TLDs
        StandardCompanyDomainMismatchError: The single STANDARD company has foreign TLDs
        MultipleStandardAssociationsError: STANDARD companies don't narrow down to one
    """
    trusted = set(root_account_tlds)
    companies_by_id: dict[int, LapCompany] = {}
    associations: list[LapUserCompanyAssociation] = []

    for company in companies:
        # At most one association per company, from the first matching entry
        member = next(
            (
                user
                for user in company.users
                if user.email == user_email and user.role.is_resolvable
            ),
            None,
        )
        if member is None:
            continue
        companies_by_id[company.id] = company
        associations.append(
            LapUserCompanyAssociation(
                company_id=company.id,
                company_name=company.name,
                role=member.role,
            )
        )

    if not associations:
        return None

    admin_associations = [a for a in associations if a.role is LapRole.ADMIN]
    if len(admin_associations) > 1:
        raise MultipleAdminAssociationsError([a.company_id for a in admin_associations])

    if admin_associations:
        association = admin_associations[0]
        company = companies_by_id[association.company_id]
        if all_company_tlds_trusted(company, trusted):
            return association
        raise AdminCompanyDomainMismatchError(company.id, get_foreign_tlds(company, trusted))

    # No ADMIN associations, so every association left is STANDARD
    if len(associations) == 1:
        association = associations[0]
        company = companies_by_id[association.company_id]
        if all_company_tlds_trusted(company, trusted):
            return association
        raise StandardCompanyDomainMismatchError(company.id, get_foreign_tlds(company, trusted))

    valid_associations = [
        a for a in associations if all_company_tlds_trusted(companies_by_id[a.company_id], trusted)
    ]
    if len(valid_associations) == 1:
        return valid_associations[0]
    raise MultipleStandardAssociationsError(
        [a.company_id for a in associations],
        [a.company_id for a in valid_associations],
    )


class LapCompanyService:
    """Service resolving LAP company associations during onboarding."""

    def parse_companies(self, payload: Sequence[LapCompany | dict[str, Any]]) -> list[LapCompany]:
        """Validate a LAP API payload into company models.

        Args:
            payload: Companies as returned by LAP (ID, Name, UsersList keys),
                or already parsed LapCompany models

        Returns:
            List of LapCompany in payload order

        Raises:
            LapPayloadError: If the payload does not have the expected shape
        """
        try:
            return _companies_adapter.validate_python(list(payload))
        except PydanticValidationError as e:
            error = LapPayloadError(e.errors(include_url=False, include_input=False))
            log_error(logger, "Rejected LAP company payload", e)
            raise error from e

    def resolve(
        self,
        companies: Sequence[LapCompany | dict[str, Any]],
        user_email: str,
        root_account_tlds: Iterable[str],
    ) -> LapUserCompanyAssociation | None:
        """Resolve the LAP company association for a user being onboarded.

        Args:
            companies: LAP API payload or parsed companies
            user_email: Email of the user being onboarded
            root_account_tlds: TLDs trusted by the user's root account

        Returns:
            The association, or None for a user unknown to LAP

        Raises:
            LapPayloadError: If the payload is malformed
            LapAssociationError: If the association is ambiguous or untrusted
        """
        lap_companies = self.parse_companies(companies)
        logger.debug(
            f"Resolving LAP company for {mask_email(user_email)} "
            f"across {len(lap_companies)} companies"
        )

        try:
            association = get_lap_company_for_user(lap_companies, user_email, root_account_tlds)
        except LapAssociationError as e:
            log_warning(
                logger,
                f"LAP company association failed ({e.code})",
                e,
                lap_error_code=e.code,
                lap_error_details=e.details,
            )
            raise

        if association is None:
            logger.info(f"No LAP company association for {mask_email(user_email)}, treating as new user")
        else:
            logger.info(
                f"Associated {mask_email(user_email)} with LAP company {association.company_id} "
                f"as {association.role}"
            )
        return association
