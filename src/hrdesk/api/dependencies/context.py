"""Caller context dependencies.

Authentication happens upstream: the gateway forwards the resolved tenant
and user as X-Tenant-ID and X-User-ID headers, which are trusted as given.
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status

from src.hrdesk.api.dependencies.db import DBSession
from src.hrdesk.core.config import get_settings
from src.hrdesk.core.context import CallerContext
from src.hrdesk.core.logging import bind_caller_context
from src.hrdesk.models import Tenant


async def get_tenant_id_from_header(
    x_tenant_id: Annotated[UUID | None, Header()] = None,
) -> UUID:
    """Extract tenant ID from header."""
    if x_tenant_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-Tenant-ID header is required",
        )
    return x_tenant_id


async def get_caller_context(
    tenant_id: Annotated[UUID, Depends(get_tenant_id_from_header)],
    session: DBSession,
    x_user_id: Annotated[UUID | None, Header()] = None,
) -> CallerContext:
    """Validate the tenant exists and is active, then build the caller context."""
    tenant = await session.get(Tenant, tenant_id)

    if tenant is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tenant not found",
        )

    if not tenant.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Tenant is inactive",
        )

    bind_caller_context(tenant.id, x_user_id)
    return CallerContext(tenant_id=tenant.id, user_id=x_user_id)


Caller = Annotated[CallerContext, Depends(get_caller_context)]


async def require_reference_data_writes(caller: Caller) -> CallerContext:
    """Require the deployment to accept CCNL writes.

    CCNL rows are read by every tenant, so loading them is an operator task.
    Enable it only on an instance that is not reachable by ordinary tenants.
    """
    if not get_settings().reference_data_writes:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Reference data writes are disabled",
        )
    return caller


ReferenceDataWriter = Annotated[CallerContext, Depends(require_reference_data_writes)]
