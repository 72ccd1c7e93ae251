"""Request/response schemas.

These pydantic models are the field validators for every manager payload.
"""

from src.hrdesk.schemas.ccnl import (
    CCNLCreate,
    CCNLRead,
    CCNLWithSalaryTableRead,
    SalaryTableIn,
    SalaryTableRead,
)
from src.hrdesk.schemas.company import (
    CompanyBaseIn,
    CompanyBaseRead,
    CompanyCreate,
    CompanyRead,
    CompanyUpdate,
    EmployeeAssignment,
)
from src.hrdesk.schemas.pagination import QueryPage
from src.hrdesk.schemas.person import PersonCreate, PersonRead, PersonUpdate
from src.hrdesk.schemas.user import UserCreate, UserRead, UserUpdate

__all__ = [
    "QueryPage",
    # Company
    "CompanyBaseIn",
    "CompanyBaseRead",
    "CompanyCreate",
    "CompanyRead",
    "CompanyUpdate",
    "EmployeeAssignment",
    # Person
    "PersonCreate",
    "PersonRead",
    "PersonUpdate",
    # CCNL
    "CCNLCreate",
    "CCNLRead",
    "CCNLWithSalaryTableRead",
    "SalaryTableIn",
    "SalaryTableRead",
    # User
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
