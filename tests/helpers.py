"""Test helper functions for common data creation patterns."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.hrdesk.core.context import CallerContext
from src.hrdesk.models import Company, CompanyBase, Person, Tenant
from tests.factories import CompanyBaseFactory, CompanyFactory, PersonFactory, TenantFactory


async def create_tenant(session: AsyncSession, **tenant_kwargs) -> Tenant:
    """Create a tenant.

    Args:
        session: Database session
        **tenant_kwargs: Args passed to TenantFactory

    Returns:
        Created tenant
    """
    tenant = TenantFactory.build(**tenant_kwargs)
    session.add(tenant)
    await session.flush()
    return tenant


def caller_for(tenant: Tenant) -> CallerContext:
    return CallerContext(tenant_id=tenant.id)


async def create_company_with_bases(
    session: AsyncSession,
    tenant: Tenant,
    base_count: int = 1,
    **company_kwargs,
) -> tuple[Company, list[CompanyBase]]:
    """Seed a company and its bases directly, without going through a manager.

    Returns:
        Tuple of (company, bases)
    """
    company = CompanyFactory.build(tenant_id=tenant.id, **company_kwargs)
    session.add(company)
    await session.flush()

    bases = [
        CompanyBaseFactory.build(tenant_id=tenant.id, company_id=company.id)
        for _ in range(base_count)
    ]
    session.add_all(bases)
    await session.flush()
    return company, bases


async def create_person(
    session: AsyncSession,
    tenant: Tenant,
    base: CompanyBase | None = None,
    **person_kwargs,
) -> Person:
    person = PersonFactory.build(
        tenant_id=tenant.id,
        company_base_id=base.id if base is not None else None,
        **person_kwargs,
    )
    session.add(person)
    await session.flush()
    return person


def company_payload(**overrides: Any) -> dict[str, Any]:
    """A valid company payload with two bases."""
    payload: dict[str, Any] = {
        "name": "Acme S.r.l.",
        "fiscal_code": "01234567890",
        "iva_code": "01234567890",
        "inps_registration_number": "1234567890",
        "inail_registration_number": "987654",
        "bases": [
            {"name": "Headquarters", "address": "Via Roma 1, Milano"},
            {"name": "Warehouse", "address": "Via Torino 22, Bergamo"},
        ],
    }
    payload.update(overrides)
    return payload
