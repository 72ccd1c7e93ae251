"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

from src.hrdesk.api.dependencies.context import (
    Caller,
    ReferenceDataWriter,
    get_caller_context,
    get_tenant_id_from_header,
    require_reference_data_writes,
)
from src.hrdesk.api.dependencies.db import DBSession, get_db_session
from src.hrdesk.api.dependencies.managers import (
    CCNLManagerDep,
    CompanyManagerDep,
    PersonManagerDep,
    UserManagerDep,
    get_ccnl_manager,
    get_company_manager,
    get_person_manager,
    get_user_manager,
)
from src.hrdesk.api.dependencies.pagination import PageParams, Pagination, get_pagination

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Caller
    "Caller",
    "ReferenceDataWriter",
    "get_caller_context",
    "get_tenant_id_from_header",
    "require_reference_data_writes",
    # Pagination
    "PageParams",
    "Pagination",
    "get_pagination",
    # Managers
    "CCNLManagerDep",
    "CompanyManagerDep",
    "PersonManagerDep",
    "UserManagerDep",
    "get_ccnl_manager",
    "get_company_manager",
    "get_person_manager",
    "get_user_manager",
]
