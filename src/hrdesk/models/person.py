"""Person (employee) model."""

from datetime import datetime
from uuid import UUID

from sqlmodel import Field, Relationship, SQLModel

from src.hrdesk.models.base import utc_now
from src.hrdesk.models.company import CompanyBase


class Person(SQLModel, table=True):
    """A person, optionally employed at one company base.

    Deleting the base releases the person (company_base_id becomes NULL).
    """

    __tablename__ = "persons"

    id: int | None = Field(default=None, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", index=True, ondelete="CASCADE")
    name: str = Field(max_length=200, index=True)
    address: str | None = Field(default=None, max_length=500)
    phone: str | None = Field(default=None, max_length=50)
    email: str | None = Field(default=None, max_length=255)
    company_base_id: int | None = Field(
        default=None, foreign_key="company_bases.id", index=True, ondelete="SET NULL"
    )
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    company_base: CompanyBase | None = Relationship()
