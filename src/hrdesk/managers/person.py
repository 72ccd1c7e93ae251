"""Person (employee) records and base assignment."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.hrdesk.core.context import CallerContext
from src.hrdesk.core.errors import ConflictError, NotFoundError
from src.hrdesk.core.logging import get_logger
from src.hrdesk.managers.base import validate_payload
from src.hrdesk.managers.customer import BaseCustomerManager
from src.hrdesk.managers.query import Join, text_search
from src.hrdesk.models import CompanyBase, Person
from src.hrdesk.models.base import utc_now
from src.hrdesk.schemas.pagination import QueryPage
from src.hrdesk.schemas.person import PersonCreate, PersonUpdate

logger = get_logger(__name__)

PERSON_SEARCH_COLUMNS = (Person.name, Person.address, Person.phone, Person.email)


def with_company_base() -> Join:
    return Join(Person.company_base, outer=True, fetch=True)


def _map_person(person: Person, model: PersonCreate) -> None:
    person.name = model.name
    person.address = model.address
    person.phone = model.phone
    person.email = str(model.email) if model.email is not None else None


def _check_can_move(person: Person, base: CompanyBase) -> None:
    """A person employed by one company must be released before joining another."""
    current = person.company_base
    if current is not None and current.company_id != base.company_id:
        logger.warning(
            "Rejected cross-company assignment",
            person_id=person.id,
            current_company_id=current.company_id,
            target_company_id=base.company_id,
        )
        raise ConflictError(
            f"Person {person.id} is already employed by another company; release them first"
        )


class PersonManager:
    """Tenant-scoped persons.

    Assignment to a company base lives here so that CompanyManager and
    person updates share one set of rules.
    """

    def __init__(self, session: AsyncSession, caller: CallerContext | None):
        self.records = BaseCustomerManager(session, caller)

    async def add(self, payload: PersonCreate | Mapping[str, Any]) -> Person:
        """Create a person, optionally assigned to a base of the tenant.

        Raises:
            ValidationFailedError: If the payload is invalid.
            NotFoundError: If company_base_id names no base of the tenant.
        """
        model = validate_payload(PersonCreate, payload)
        person = Person()
        _map_person(person, model)
        if model.company_base_id is not None:
            person.company_base = await self._require_base(model.company_base_id)

        await self.records.save(person)
        logger.info("Person created", person_id=person.id, company_base_id=person.company_base_id)
        return person

    async def update(self, person_id: int, payload: PersonUpdate | Mapping[str, Any]) -> Person:
        """Replace a person's fields.

        A changed company_base_id follows the assignment rules of
        assign_to_base; None releases the person.

        Raises:
            ValidationFailedError: If the payload is invalid.
            NotFoundError: If the person or the new base does not exist.
            ConflictError: If the move crosses companies.
        """
        model = validate_payload(PersonUpdate, payload)
        person = await self.get_by_id(person_id)
        if person is None:
            raise NotFoundError(f"Person {person_id} not found")

        if model.company_base_id != person.company_base_id:
            if model.company_base_id is None:
                person.company_base = None
            else:
                base = await self._require_base(model.company_base_id)
                _check_can_move(person, base)
                person.company_base = base

        _map_person(person, model)
        person.updated_at = utc_now()
        await self.records.save(person)
        logger.info("Person updated", person_id=person.id)
        return person

    async def get_by_id(self, person_id: int) -> Person | None:
        return await self.records.get_by_id(Person, person_id, with_company_base())

    async def list(
        self,
        search: str | None = None,
        page: int | None = None,
        page_limit: int | None = None,
    ) -> QueryPage[Person]:
        """List persons, searching name, address, phone and email."""
        return await self.records.list(
            Person,
            with_company_base(),
            text_search(search, *PERSON_SEARCH_COLUMNS),
            page=page,
            page_limit=page_limit,
        )

    async def delete(self, person_id: int) -> None:
        await self.records.delete(Person, person_id)
        logger.info("Person deleted", person_id=person_id)

    async def assign_to_base(self, company_base_id: int, person_id: int) -> Person:
        """Employ a person at a base.

        Moving between bases of the same company is allowed.

        Raises:
            NotFoundError: If the base or the person does not exist in the tenant.
            ConflictError: If the person is employed by a different company.
        """
        base = await self._require_base(company_base_id)
        person = await self.get_by_id(person_id)
        if person is None:
            raise NotFoundError(f"Person {person_id} not found")

        _check_can_move(person, base)
        person.company_base = base
        person.updated_at = utc_now()
        await self.records.save(person)
        logger.info(
            "Person assigned to base",
            person_id=person.id,
            company_base_id=base.id,
            company_id=base.company_id,
        )
        return person

    async def release_from_base(self, company_base_id: int, person_id: int) -> None:
        """Release a person from a base. No-op unless they are employed there."""
        person = await self.get_by_id(person_id)
        if person is None or person.company_base_id != company_base_id:
            logger.debug(
                "Nothing to release", person_id=person_id, company_base_id=company_base_id
            )
            return

        person.company_base = None
        person.updated_at = utc_now()
        await self.records.save(person)
        logger.info("Person released from base", person_id=person_id, company_base_id=company_base_id)

    async def _require_base(self, company_base_id: int) -> CompanyBase:
        base = await self.records.get_by_id(CompanyBase, company_base_id)
        if base is None:
            raise NotFoundError(f"Company base {company_base_id} not found")
        return base
