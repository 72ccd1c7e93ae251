"""Company aggregate: a company and its bases (sites)."""

from datetime import datetime
from uuid import UUID

from sqlmodel import Field, Relationship, SQLModel

from src.hrdesk.models.base import utc_now


class Company(SQLModel, table=True):
    """Aggregate root. Deleting a company deletes its bases in the database."""

    __tablename__ = "companies"

    id: int | None = Field(default=None, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", index=True, ondelete="CASCADE")
    name: str = Field(max_length=200, index=True)
    fiscal_code: str | None = Field(default=None, max_length=16)
    iva_code: str | None = Field(default=None, max_length=11)
    inps_registration_number: str | None = Field(default=None, max_length=20)
    inail_registration_number: str | None = Field(default=None, max_length=20)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    bases: list["CompanyBase"] = Relationship(
        back_populates="company",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "passive_deletes": True,
            "order_by": "CompanyBase.id",
        },
    )


class CompanyBase(SQLModel, table=True):
    """A site of a company; employees are assigned to bases."""

    __tablename__ = "company_bases"

    id: int | None = Field(default=None, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", index=True, ondelete="CASCADE")
    company_id: int | None = Field(
        default=None, foreign_key="companies.id", index=True, ondelete="CASCADE"
    )
    name: str = Field(max_length=200)
    address: str | None = Field(default=None, max_length=500)

    company: Company | None = Relationship(back_populates="bases")
