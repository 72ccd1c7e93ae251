"""Query specifications composed by the managers.

A QuerySpec is an immutable description of a listing or lookup: the model,
then an ordered tuple of joins and filters. Scope parts (the tenant filter)
live in their own tuple, which only a scope object writes and which is always
applied before the domain parts. Domain code can append parts but cannot
remove, replace or reorder the scope.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from sqlalchemy import ColumnElement, Select, or_
from sqlalchemy.orm import selectinload


@dataclass(frozen=True, slots=True)
class Join:
    """Join a relationship of a model already in the FROM clause.

    Args:
        relationship: Relationship attribute, e.g. ``Company.bases``.
        outer: LEFT OUTER JOIN instead of INNER JOIN.
        fetch: Also eager-load the relationship on the returned rows.
        on: Extra condition ANDed to the relationship's join condition.
    """

    relationship: Any
    outer: bool = False
    fetch: bool = False
    on: ColumnElement[bool] | None = None

    def apply(self, stmt: Select) -> Select:
        target = self.relationship if self.on is None else self.relationship.and_(self.on)
        return stmt.join(target, isouter=self.outer)


@dataclass(frozen=True, slots=True)
class Where:
    """A filter predicate with its bound parameters."""

    clause: ColumnElement[bool]

    def apply(self, stmt: Select) -> Select:
        return stmt.where(self.clause)


QueryPart = Join | Where


def text_search(term: str | None, *columns: Any) -> Where | None:
    """Case-insensitive substring match of `term` against any of `columns`.

    Returns None for an empty term so callers can pass the result straight
    to QuerySpec.extend. LIKE wildcards in the term match literally.
    """
    if term is None or not term.strip():
        return None
    term = term.strip()
    return Where(or_(*(column.icontains(term, autoescape=True) for column in columns)))


@dataclass(frozen=True, slots=True)
class QuerySpec:
    model: type[Any]
    scope: tuple[QueryPart, ...] = field(default=())
    parts: tuple[QueryPart, ...] = field(default=())

    def extend(self, *parts: QueryPart | None) -> "QuerySpec":
        """Append domain parts. None entries are skipped."""
        return replace(self, parts=self.parts + tuple(p for p in parts if p is not None))

    def restrict(self, *parts: QueryPart) -> "QuerySpec":
        """Append scope parts. Reserved for scope objects."""
        return replace(self, scope=self.scope + parts)

    def ordered_parts(self) -> tuple[QueryPart, ...]:
        return self.scope + self.parts

    def apply(self, stmt: Select) -> Select:
        """Apply scope parts, then domain parts, in insertion order."""
        for part in self.ordered_parts():
            stmt = part.apply(stmt)
        return stmt

    def load_options(self) -> tuple[Any, ...]:
        """Eager-load options for every join marked `fetch`.

        A fetched relationship must start from the root model or from the
        target of an earlier fetched join.
        """
        loaders: dict[type[Any], Any] = {}
        options: tuple[Any, ...] = ()
        for part in self.ordered_parts():
            if not isinstance(part, Join) or not part.fetch:
                continue
            parent = part.relationship.parent.class_
            if parent is self.model:
                loader = selectinload(part.relationship)
            elif parent in loaders:
                loader = loaders[parent].selectinload(part.relationship)
            else:
                raise ValueError(
                    f"Cannot fetch {part.relationship}: {parent.__name__} is not loaded "
                    f"from {self.model.__name__}"
                )
            loaders[part.relationship.property.mapper.class_] = loader
            options += (loader,)
        return options
