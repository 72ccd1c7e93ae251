"""Tenant and user models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from src.hrdesk.models.base import utc_now


class Tenant(SQLModel, table=True):
    """Customer account owning every tenant-specific record."""

    __tablename__ = "tenants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100, index=True)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)


class User(SQLModel, table=True):
    """A user acting on behalf of a tenant."""

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("tenant_id", "email", name="uq_users_tenant_email"),)

    id: int | None = Field(default=None, primary_key=True)
    tenant_id: UUID = Field(foreign_key="tenants.id", index=True, ondelete="CASCADE")
    email: str = Field(max_length=255, index=True)
    full_name: str = Field(max_length=100)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
