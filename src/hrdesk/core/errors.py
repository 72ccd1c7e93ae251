"""Domain error taxonomy.

Every error raised by the managers derives from HRDeskError, except storage
faults, which are SQLAlchemy's own exceptions propagated unchanged.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

# Storage faults (constraint violations, connectivity) are never wrapped.
PersistenceError = SQLAlchemyError


class HRDeskError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgumentError(HRDeskError):
    """Malformed pagination parameters or missing required context."""


class NotFoundError(HRDeskError):
    """A required row is not visible to the caller's tenant."""


class ConflictError(HRDeskError):
    """A relational invariant would be violated."""


class ValidationFailedError(HRDeskError):
    """Field validation rejected the payload.

    `errors` maps field names to lists of messages. Collections nest by
    index: {"bases": {1: {"name": ["Field required"]}}}.
    """

    def __init__(self, errors: dict[Any, Any], message: str = "Validation failed"):
        super().__init__(message)
        self.errors = errors

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "ValidationFailedError":
        return cls(error_tree(exc.errors()))


def error_tree(errors: Sequence[Mapping[str, Any]]) -> dict[Any, Any]:
    """Fold pydantic-style error entries into a tree keyed by their `loc`."""
    tree: dict[Any, Any] = {}
    for error in errors:
        loc = tuple(error["loc"]) or ("__root__",)
        node = tree
        for key in loc[:-1]:
            child = node.setdefault(key, {})
            if not isinstance(child, dict):
                # A message is already recorded for this path; keep it flat.
                break
            node = child
        else:
            node.setdefault(loc[-1], []).append(error["msg"])
            continue
        node[key].append(error["msg"])
    return tree
