"""Company aggregate: companies, their bases and their employees."""

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.hrdesk.core.context import CallerContext
from src.hrdesk.core.errors import ConflictError, NotFoundError
from src.hrdesk.core.logging import get_logger
from src.hrdesk.managers.base import validate_payload
from src.hrdesk.managers.customer import BaseCustomerManager
from src.hrdesk.managers.person import PERSON_SEARCH_COLUMNS, PersonManager, with_company_base
from src.hrdesk.managers.query import Join, Where, text_search
from src.hrdesk.models import Company, CompanyBase, Person
from src.hrdesk.models.base import utc_now
from src.hrdesk.schemas.company import CompanyBaseIn, CompanyCreate, CompanyUpdate
from src.hrdesk.schemas.pagination import QueryPage

logger = get_logger(__name__)

COMPANY_SEARCH_COLUMNS = (
    Company.name,
    Company.fiscal_code,
    Company.iva_code,
    Company.inps_registration_number,
    Company.inail_registration_number,
    CompanyBase.name,
    CompanyBase.address,
)


def with_bases() -> Join:
    return Join(Company.bases, outer=True, fetch=True)


def check_bases_append_only(
    persisted: Sequence[CompanyBase], submitted: Sequence[CompanyBaseIn]
) -> None:
    """Reject a base list that would drop a persisted base.

    Every persisted base must be submitted again, by id, exactly once.
    Entries without id are new bases and are always allowed.
    """
    persisted_ids = {base.id for base in persisted}
    submitted_ids = [base.id for base in submitted if base.id is not None]
    if (
        len(submitted) < len(persisted)
        or len(submitted_ids) != len(set(submitted_ids))
        or set(submitted_ids) != persisted_ids
    ):
        raise ConflictError("Updating a company cannot remove or replace its bases")


def _map_company(company: Company, model: CompanyCreate) -> None:
    company.name = model.name
    company.fiscal_code = model.fiscal_code
    company.iva_code = model.iva_code
    company.inps_registration_number = model.inps_registration_number
    company.inail_registration_number = model.inail_registration_number

    if model.bases is None:
        return

    existing = {base.id: base for base in company.bases}
    bases = []
    for base_model in model.bases:
        base = existing.get(base_model.id) if base_model.id is not None else None
        if base is None:
            base = CompanyBase()
        base.name = base_model.name
        base.address = base_model.address
        bases.append(base)
    company.bases = bases


class CompanyManager:
    """Tenant-scoped companies.

    Employee moves are delegated to a PersonManager sharing this manager's
    session, so a request never opens a second unit of work.
    """

    def __init__(self, session: AsyncSession, caller: CallerContext | None):
        self.records = BaseCustomerManager(session, caller)
        self.persons = PersonManager(session, caller)

    async def add(self, payload: CompanyCreate | Mapping[str, Any]) -> Company:
        """Create a company with its bases.

        Raises:
            ValidationFailedError: If the payload (or any base) is invalid.
        """
        model = validate_payload(CompanyCreate, payload)
        company = Company()
        _map_company(company, model)

        await self.records.save(company, *company.bases)
        logger.info("Company created", company_id=company.id, bases=len(company.bases))
        return company

    async def update(self, company_id: int, payload: CompanyUpdate | Mapping[str, Any]) -> Company:
        """Update a company. Bases can be added and edited, never removed.

        Raises:
            ValidationFailedError: If the payload is invalid.
            NotFoundError: If the company is not visible to the caller.
            ConflictError: If the submitted bases omit a persisted base.
        """
        model = validate_payload(CompanyUpdate, payload)
        company = await self.get_by_id(company_id)
        if company is None:
            raise NotFoundError(f"Company {company_id} not found")

        if model.bases is not None:
            try:
                check_bases_append_only(company.bases, model.bases)
            except ConflictError:
                logger.warning("Rejected base removal", company_id=company_id)
                raise

        _map_company(company, model)
        company.updated_at = utc_now()
        await self.records.save(company, *company.bases)
        logger.info("Company updated", company_id=company.id, bases=len(company.bases))
        return company

    async def get_by_id(self, company_id: int) -> Company | None:
        return await self.records.get_by_id(Company, company_id, with_bases())

    async def get_base_by_id(self, company_base_id: int) -> CompanyBase | None:
        return await self.records.get_by_id(
            CompanyBase, company_base_id, Join(CompanyBase.company, fetch=True)
        )

    async def list(
        self,
        search: str | None = None,
        page: int | None = None,
        page_limit: int | None = None,
    ) -> QueryPage[Company]:
        """List companies, searching company codes and base names/addresses."""
        return await self.records.list(
            Company,
            with_bases(),
            text_search(search, *COMPANY_SEARCH_COLUMNS),
            page=page,
            page_limit=page_limit,
        )

    async def list_employees(
        self,
        company_id: int,
        search: str | None = None,
        page: int | None = None,
        page_limit: int | None = None,
    ) -> QueryPage[Person]:
        """List persons employed at any base of the company."""
        return await self.records.list(
            Person,
            Join(Person.company_base, on=CompanyBase.company_id == company_id, fetch=True),
            text_search(search, *PERSON_SEARCH_COLUMNS),
            page=page,
            page_limit=page_limit,
        )

    async def list_base_employees(
        self,
        company_base_id: int,
        search: str | None = None,
        page: int | None = None,
        page_limit: int | None = None,
    ) -> QueryPage[Person]:
        """List persons employed at one base."""
        return await self.records.list(
            Person,
            with_company_base(),
            Where(Person.company_base_id == company_base_id),
            text_search(search, *PERSON_SEARCH_COLUMNS),
            page=page,
            page_limit=page_limit,
        )

    async def add_employee(self, company_base_id: int, person_id: int) -> Person:
        """Employ a person at a base. See PersonManager.assign_to_base."""
        return await self.persons.assign_to_base(company_base_id, person_id)

    async def remove_employee(self, company_base_id: int, person_id: int) -> None:
        """Release a person from a base. Idempotent."""
        await self.persons.release_from_base(company_base_id, person_id)

    async def delete(self, company_id: int) -> None:
        """Delete a company.

        The database deletes its bases and releases the persons employed there.
        """
        await self.records.delete(Company, company_id)
        logger.info("Company deleted", company_id=company_id)
