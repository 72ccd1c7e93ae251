"""Company schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.hrdesk.core.validators import validate_fiscal_code, validate_iva_code


def _strip_or_none(v: str | None) -> str | None:
    if v is not None:
        v = v.strip()
        if not v:
            return None
    return v


class CompanyBaseIn(BaseModel):
    """A base as submitted by the client. Bases without id are new."""

    id: int | None = None
    name: str = Field(min_length=1, max_length=200)
    address: str | None = Field(default=None, max_length=500)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Base name cannot be empty or whitespace only")
        return v

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str | None) -> str | None:
        return _strip_or_none(v)


class CompanyCreate(BaseModel):
    """Schema for creating a company together with its bases."""

    name: str = Field(min_length=1, max_length=200)
    fiscal_code: str | None = None
    iva_code: str | None = None
    inps_registration_number: str | None = Field(default=None, max_length=20)
    inail_registration_number: str | None = Field(default=None, max_length=20)
    bases: list[CompanyBaseIn] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Company name cannot be empty or whitespace only")
        return v

    @field_validator("fiscal_code")
    @classmethod
    def validate_fiscal_code(cls, v: str | None) -> str | None:
        v = _strip_or_none(v)
        return validate_fiscal_code(v) if v is not None else None

    @field_validator("iva_code")
    @classmethod
    def validate_iva_code(cls, v: str | None) -> str | None:
        v = _strip_or_none(v)
        return validate_iva_code(v) if v is not None else None

    @field_validator("inps_registration_number", "inail_registration_number")
    @classmethod
    def validate_registration_number(cls, v: str | None) -> str | None:
        return _strip_or_none(v)


class CompanyUpdate(CompanyCreate):
    """Schema for updating a company.

    `bases` omitted leaves the bases untouched. When given, it must list
    every persisted base (by id); bases without id are appended.
    """

    bases: list[CompanyBaseIn] | None = None  # type: ignore[assignment]


class CompanyBaseRead(BaseModel):
    id: int
    company_id: int | None
    name: str
    address: str | None

    model_config = {"from_attributes": True}


class CompanyRead(BaseModel):
    id: int
    name: str
    fiscal_code: str | None
    iva_code: str | None
    inps_registration_number: str | None
    inail_registration_number: str | None
    bases: list[CompanyBaseRead]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class EmployeeAssignment(BaseModel):
    """Body for assigning a person to a base."""

    person_id: int
