"""Generic paginated CRUD over SQLModel tables."""

from collections.abc import Mapping
from typing import Any, Protocol

from pydantic import BaseModel, ValidationError
from sqlalchemy import func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from src.hrdesk.core.config import get_settings
from src.hrdesk.core.errors import InvalidArgumentError, ValidationFailedError
from src.hrdesk.core.logging import get_logger
from src.hrdesk.managers.query import QueryPart, QuerySpec, Where
from src.hrdesk.schemas.pagination import QueryPage

logger = get_logger(__name__)

# Largest OFFSET or LIMIT the database drivers accept as a bound parameter.
MAX_ROW_OFFSET = 2**63 - 1


class QueryScope(Protocol):
    """Restricts every query and stamps every saved entity."""

    def restrict(self, spec: QuerySpec) -> QuerySpec: ...

    def stamp(self, entity: SQLModel) -> None: ...


def validate_payload[SchemaType: BaseModel](
    schema: type[SchemaType], payload: SchemaType | BaseModel | Mapping[str, Any]
) -> SchemaType:
    """Run the field validators of `schema` over `payload`.

    Raises:
        ValidationFailedError: With the nested field-path mapping of every error.
    """
    if isinstance(payload, schema):
        return payload
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise ValidationFailedError.from_pydantic(e) from e


def _check_pagination(page: Any, page_limit: Any) -> tuple[int, int]:
    if page is None:
        page = 0
    if page_limit is None:
        page_limit = get_settings().default_page_limit
    for name, value in (("page", page), ("page_limit", page_limit)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise InvalidArgumentError(f"{name} must be a non-negative integer, got {value!r}")
    if page_limit > MAX_ROW_OFFSET or page * page_limit > MAX_ROW_OFFSET:
        raise InvalidArgumentError(f"page {page} of size {page_limit} is out of range")
    return page, page_limit


class BaseManager:
    """Paginated CRUD primitive, oblivious to what the entities are.

    Every read goes through a QuerySpec; callers add joins and filters as
    QueryParts. When constructed with a scope, the scope restricts every
    query before the caller's parts and stamps every saved entity.

    The session is the request's unit of work. Managers flush but never
    commit; the owner of the session decides the transaction outcome.
    """

    def __init__(self, session: AsyncSession, scope: QueryScope | None = None):
        self.session = session
        self.scope = scope

    def query(self, model: type[SQLModel], *parts: QueryPart | None) -> QuerySpec:
        """Build the spec for `model`: scope first, then `parts`."""
        spec = QuerySpec(model)
        if self.scope is not None:
            spec = self.scope.restrict(spec)
        return spec.extend(*parts)

    async def save(self, *entities: SQLModel) -> None:
        """Insert or update entities and flush them.

        Raises:
            PersistenceError: On constraint violations, unchanged from SQLAlchemy.
        """
        for entity in entities:
            if self.scope is not None:
                self.scope.stamp(entity)
            self.session.add(entity)
        await self.session.flush()

    async def list[ModelType: SQLModel](
        self,
        model: type[ModelType],
        *parts: QueryPart | None,
        page: int | None = None,
        page_limit: int | None = None,
    ) -> QueryPage[ModelType]:
        """Return one page of `model` rows matching `parts`.

        Rows are distinct even when joins fan out, ordered by primary key.
        `total` counts every matching row before pagination.

        Raises:
            InvalidArgumentError: If page or page_limit is not a non-negative int.
        """
        page, page_limit = _check_pagination(page, page_limit)
        spec = self.query(model, *parts)
        pk = inspect(model).primary_key[0]

        matching = spec.apply(select(pk)).distinct()
        total = await self.session.scalar(select(func.count()).select_from(matching.subquery()))

        ids = (
            await self.session.scalars(
                matching.order_by(pk).offset(page * page_limit).limit(page_limit)
            )
        ).all()
        if not ids:
            return QueryPage(items=[], total=total or 0)

        stmt = (
            select(model)
            .where(pk.in_(ids))
            .order_by(pk)
            .options(*spec.load_options())
            .execution_options(populate_existing=True)
        )
        items = (await self.session.scalars(stmt)).all()
        return QueryPage(items=[*items], total=total or 0)

    async def find_one[ModelType: SQLModel](
        self, model: type[ModelType], *parts: QueryPart | None
    ) -> ModelType | None:
        """Return the first row matching `parts`, or None."""
        spec = self.query(model, *parts)
        stmt = (
            spec.apply(select(model))
            .options(*spec.load_options())
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def get_by_id[ModelType: SQLModel](
        self, model: type[ModelType], id: Any, *parts: QueryPart | None
    ) -> ModelType | None:
        """Look up a row by primary key. Absence is not an error."""
        if id is None:
            return None
        pk = inspect(model).primary_key[0]
        return await self.find_one(model, *parts, Where(pk == id))

    async def delete(self, model: type[SQLModel], id: Any, *parts: QueryPart | None) -> None:
        """Delete a row by primary key if it is visible through `parts`.

        Deleting a missing row is a no-op. Dependents are handled by the
        cascade rules declared on the models.
        """
        entity = await self.get_by_id(model, id, *parts)
        if entity is None:
            logger.debug("Nothing to delete", model=model.__name__, id=id)
            return
        await self.session.delete(entity)
        await self.session.flush()
