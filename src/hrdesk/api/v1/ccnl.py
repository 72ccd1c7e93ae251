"""CCNL reference data endpoints.

CCNLs are shared by every tenant; a valid X-Tenant-ID is still required.
Creating them is refused unless the instance enables reference data writes.
"""

from fastapi import APIRouter, HTTPException, status

from src.hrdesk.api.dependencies import CCNLManagerDep, PageParams, ReferenceDataWriter
from src.hrdesk.schemas.ccnl import (
    CCNLCreate,
    CCNLRead,
    CCNLWithSalaryTableRead,
    SalaryTableRead,
)
from src.hrdesk.schemas.pagination import QueryPage

router = APIRouter(prefix="/ccnl", tags=["ccnl"])


@router.get("", response_model=QueryPage[CCNLRead], summary="List CCNLs")
async def list_ccnl(manager: CCNLManagerDep, params: PageParams) -> QueryPage[CCNLRead]:
    page = await manager.list(
        search=params.search, page=params.page, page_limit=params.page_limit
    )
    return page.map(CCNLRead.model_validate)


@router.post(
    "",
    response_model=CCNLWithSalaryTableRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create CCNL with its salary table",
    responses={403: {"description": "Reference data writes are disabled"}},
)
async def create_ccnl(
    request: CCNLCreate, manager: CCNLManagerDep, _writer: ReferenceDataWriter
) -> CCNLWithSalaryTableRead:
    ccnl = await manager.add(request)
    return CCNLWithSalaryTableRead.model_validate(ccnl)


@router.get(
    "/{ccnl_id}",
    response_model=CCNLWithSalaryTableRead,
    summary="Get CCNL with its salary table",
    responses={404: {"description": "CCNL not found"}},
)
async def get_ccnl(ccnl_id: int, manager: CCNLManagerDep) -> CCNLWithSalaryTableRead:
    ccnl = await manager.get_by_id(ccnl_id, with_salary=True)
    if ccnl is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"CCNL {ccnl_id} not found",
        )
    return CCNLWithSalaryTableRead.model_validate(ccnl)


@router.get(
    "/{ccnl_id}/levels",
    response_model=QueryPage[SalaryTableRead],
    summary="List salary levels of a CCNL",
)
async def list_ccnl_levels(
    ccnl_id: int, manager: CCNLManagerDep, params: PageParams
) -> QueryPage[SalaryTableRead]:
    page = await manager.list_levels(
        ccnl_id, params.search, page=params.page, page_limit=params.page_limit
    )
    return page.map(SalaryTableRead.model_validate)
