"""Person schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.hrdesk.core.validators import validate_phone
from src.hrdesk.schemas.company import CompanyBaseRead


class PersonCreate(BaseModel):
    """Schema for creating or replacing a person."""

    name: str = Field(min_length=1, max_length=200)
    address: str | None = Field(default=None, max_length=500)
    phone: str | None = Field(default=None, max_length=50)
    email: EmailStr | None = None
    company_base_id: int | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Name cannot be empty or whitespace only")
        return v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return validate_phone(v)


# Updates replace every field; a null company_base_id releases the person.
PersonUpdate = PersonCreate


class PersonRead(BaseModel):
    id: int
    name: str
    address: str | None
    phone: str | None
    email: str | None
    company_base_id: int | None
    company_base: CompanyBaseRead | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
