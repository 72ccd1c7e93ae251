"""Person endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.hrdesk.api.dependencies import PageParams, PersonManagerDep
from src.hrdesk.schemas.pagination import QueryPage
from src.hrdesk.schemas.person import PersonCreate, PersonRead, PersonUpdate

router = APIRouter(prefix="/persons", tags=["persons"])


@router.get(
    "",
    response_model=QueryPage[PersonRead],
    summary="List persons",
    description="Search persons by name, address, phone and email.",
)
async def list_persons(manager: PersonManagerDep, params: PageParams) -> QueryPage[PersonRead]:
    page = await manager.list(params.search, page=params.page, page_limit=params.page_limit)
    return page.map(PersonRead.model_validate)


@router.post(
    "",
    response_model=PersonRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create person",
    responses={404: {"description": "Company base not found"}},
)
async def create_person(request: PersonCreate, manager: PersonManagerDep) -> PersonRead:
    person = await manager.add(request)
    return PersonRead.model_validate(person)


@router.get(
    "/{person_id}",
    response_model=PersonRead,
    summary="Get person",
    responses={404: {"description": "Person not found"}},
)
async def get_person(person_id: int, manager: PersonManagerDep) -> PersonRead:
    person = await manager.get_by_id(person_id)
    if person is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Person {person_id} not found",
        )
    return PersonRead.model_validate(person)


@router.put(
    "/{person_id}",
    response_model=PersonRead,
    summary="Update person",
    responses={
        404: {"description": "Person or company base not found"},
        409: {"description": "Person is employed by another company"},
    },
)
async def update_person(
    person_id: int, request: PersonUpdate, manager: PersonManagerDep
) -> PersonRead:
    person = await manager.update(person_id, request)
    return PersonRead.model_validate(person)


@router.delete(
    "/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete person",
)
async def delete_person(person_id: int, manager: PersonManagerDep) -> None:
    await manager.delete(person_id)
