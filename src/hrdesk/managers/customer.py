"""Tenant scoping for customer-owned records."""

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from src.hrdesk.core.context import CallerContext
from src.hrdesk.core.errors import InvalidArgumentError
from src.hrdesk.managers.base import BaseManager
from src.hrdesk.managers.query import QuerySpec, Where


@dataclass(frozen=True, slots=True)
class TenantScope:
    """Limits queries to one tenant and stamps that tenant on writes."""

    tenant_id: UUID

    def restrict(self, spec: QuerySpec) -> QuerySpec:
        return spec.restrict(Where(_tenant_column(spec.model) == self.tenant_id))

    def stamp(self, entity: SQLModel) -> None:
        column = _tenant_column(type(entity))
        # Inbound payloads never choose the tenant.
        setattr(entity, column.key, self.tenant_id)


def _tenant_column(model: type[SQLModel]):  # type: ignore[no-untyped-def]
    column = getattr(model, "tenant_id", None)
    if column is None:
        raise TypeError(f"{model.__name__} is not a tenant-scoped model")
    return column


class BaseCustomerManager(BaseManager):
    """BaseManager bound to the caller's tenant.

    No read, update or delete issued through this manager can reach a row
    of another tenant, and every saved entity belongs to the caller's tenant.
    """

    def __init__(self, session: AsyncSession, caller: CallerContext | None):
        if caller is None or caller.tenant_id is None:
            raise InvalidArgumentError("A caller context with a tenant is required")
        super().__init__(session, TenantScope(caller.tenant_id))
        self.caller = caller

    @property
    def tenant_id(self) -> UUID:
        return self.caller.tenant_id
