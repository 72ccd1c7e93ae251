"""Manager layer - tenant-scoped data access.

Re-exports all managers for convenient imports.
"""

from src.hrdesk.managers.base import BaseManager, validate_payload
from src.hrdesk.managers.ccnl import CCNLManager
from src.hrdesk.managers.company import CompanyManager
from src.hrdesk.managers.customer import BaseCustomerManager, TenantScope
from src.hrdesk.managers.person import PersonManager
from src.hrdesk.managers.query import Join, QueryPart, QuerySpec, Where, text_search
from src.hrdesk.managers.user import UserManager

__all__ = [
    # Query composition
    "Join",
    "QueryPart",
    "QuerySpec",
    "Where",
    "text_search",
    # Base
    "BaseManager",
    "BaseCustomerManager",
    "TenantScope",
    "validate_payload",
    # Domain
    "CCNLManager",
    "CompanyManager",
    "PersonManager",
    "UserManager",
]
