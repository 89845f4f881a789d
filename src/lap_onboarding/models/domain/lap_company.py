"""LAP company domain models."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class LapRole(StrEnum):
    """LAP membership role enum.

    Only ADMIN and STANDARD take part in company resolution. Every other role
    LAP reports (e.g. "Reseller") is read as OTHER and ignored.
    """

    ADMIN = "Admin"
    STANDARD = "Standard"
    OTHER = "Other"

    @classmethod
    def _missing_(cls, value: object) -> "LapRole | None":
        if isinstance(value, str):
            return cls.OTHER
        return None

    @property
    def is_resolvable(self) -> bool:
        """Check if the role participates in company resolution."""
        return self in (LapRole.ADMIN, LapRole.STANDARD)


class LapCompanyUser(BaseModel):
    """Membership entry of a LAP company roster."""

    email: str = Field(alias="Email")
    role: LapRole = Field(alias="Role")

    @field_validator("role", mode="before")
    @classmethod
    def coerce_role(cls, v: object) -> object:
        """Read unknown LAP role names as OTHER."""
        if isinstance(v, str):
            return LapRole(v)
        return v

    class Config:
        """Pydantic config."""

        populate_by_name = True
        frozen = True


class LapCompany(BaseModel):
    """LAP company record with its user roster."""

    id: int = Field(alias="ID")
    name: str = Field(alias="Name")
    users: list[LapCompanyUser] = Field(default_factory=list, alias="UsersList")

    class Config:
        """Pydantic config."""

        populate_by_name = True
        frozen = True


class LapUserCompanyAssociation(BaseModel):
    """The company a user is associated with, and under which role."""

    company_id: int
    company_name: str
    role: LapRole

    class Config:
        """Pydantic config."""

        frozen = True
