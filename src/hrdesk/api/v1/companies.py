"""Company endpoints: companies, their bases and the persons employed there.

Routes under /companies/bases are declared before /companies/{company_id}
so that "bases" is never parsed as a company id.
"""

from fastapi import APIRouter, HTTPException, status

from src.hrdesk.api.dependencies import CompanyManagerDep, PageParams
from src.hrdesk.schemas.company import (
    CompanyBaseRead,
    CompanyCreate,
    CompanyRead,
    CompanyUpdate,
    EmployeeAssignment,
)
from src.hrdesk.schemas.pagination import QueryPage
from src.hrdesk.schemas.person import PersonRead

router = APIRouter(prefix="/companies", tags=["companies"])


@router.get(
    "",
    response_model=QueryPage[CompanyRead],
    summary="List companies",
    description="Search companies by name, codes, and base names or addresses.",
)
async def list_companies(manager: CompanyManagerDep, params: PageParams) -> QueryPage[CompanyRead]:
    page = await manager.list(params.search, page=params.page, page_limit=params.page_limit)
    return page.map(CompanyRead.model_validate)


@router.post(
    "",
    response_model=CompanyRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create company",
    responses={
        201: {"description": "Company created with its bases"},
        422: {"description": "Validation failed"},
    },
)
async def create_company(request: CompanyCreate, manager: CompanyManagerDep) -> CompanyRead:
    company = await manager.add(request)
    return CompanyRead.model_validate(company)


@router.get(
    "/bases/{company_base_id}",
    response_model=CompanyBaseRead,
    summary="Get company base",
    responses={404: {"description": "Company base not found"}},
)
async def get_company_base(company_base_id: int, manager: CompanyManagerDep) -> CompanyBaseRead:
    base = await manager.get_base_by_id(company_base_id)
    if base is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Company base {company_base_id} not found",
        )
    return CompanyBaseRead.model_validate(base)


@router.get(
    "/bases/{company_base_id}/employees",
    response_model=QueryPage[PersonRead],
    summary="List base employees",
)
async def list_base_employees(
    company_base_id: int, manager: CompanyManagerDep, params: PageParams
) -> QueryPage[PersonRead]:
    page = await manager.list_base_employees(
        company_base_id, params.search, page=params.page, page_limit=params.page_limit
    )
    return page.map(PersonRead.model_validate)


@router.post(
    "/bases/{company_base_id}/employees",
    response_model=PersonRead,
    summary="Employ a person at a base",
    responses={
        404: {"description": "Company base or person not found"},
        409: {"description": "Person is employed by another company"},
    },
)
async def add_base_employee(
    company_base_id: int, request: EmployeeAssignment, manager: CompanyManagerDep
) -> PersonRead:
    person = await manager.add_employee(company_base_id, request.person_id)
    return PersonRead.model_validate(person)


@router.delete(
    "/bases/{company_base_id}/employees/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Release a person from a base",
)
async def remove_base_employee(
    company_base_id: int, person_id: int, manager: CompanyManagerDep
) -> None:
    await manager.remove_employee(company_base_id, person_id)


@router.get(
    "/{company_id}",
    response_model=CompanyRead,
    summary="Get company",
    responses={404: {"description": "Company not found"}},
)
async def get_company(company_id: int, manager: CompanyManagerDep) -> CompanyRead:
    company = await manager.get_by_id(company_id)
    if company is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Company {company_id} not found",
        )
    return CompanyRead.model_validate(company)


@router.put(
    "/{company_id}",
    response_model=CompanyRead,
    summary="Update company",
    description="Replace company fields. Bases can be added or edited, never removed.",
    responses={
        404: {"description": "Company not found"},
        409: {"description": "Submitted bases omit a persisted base"},
        422: {"description": "Validation failed"},
    },
)
async def update_company(
    company_id: int, request: CompanyUpdate, manager: CompanyManagerDep
) -> CompanyRead:
    company = await manager.update(company_id, request)
    return CompanyRead.model_validate(company)


@router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete company",
    description="Delete a company and its bases. Employees are released, not deleted.",
)
async def delete_company(company_id: int, manager: CompanyManagerDep) -> None:
    await manager.delete(company_id)


@router.get(
    "/{company_id}/employees",
    response_model=QueryPage[PersonRead],
    summary="List company employees",
)
async def list_company_employees(
    company_id: int, manager: CompanyManagerDep, params: PageParams
) -> QueryPage[PersonRead]:
    page = await manager.list_employees(
        company_id, params.search, page=params.page, page_limit=params.page_limit
    )
    return page.map(PersonRead.model_validate)
