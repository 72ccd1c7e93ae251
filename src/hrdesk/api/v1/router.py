from fastapi import APIRouter

from src.hrdesk.api.v1 import ccnl, companies, persons, users

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(companies.router)
api_router.include_router(persons.router)
api_router.include_router(ccnl.router)
api_router.include_router(users.router)
