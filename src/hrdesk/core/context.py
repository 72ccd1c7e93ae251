"""Caller context resolved by the authentication layer."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True)
class CallerContext:
    """Identity of the acting caller.

    The tenant is trusted as given; every tenant-scoped manager reads and
    writes only rows of this tenant.
    """

    tenant_id: UUID
    user_id: UUID | None = None
