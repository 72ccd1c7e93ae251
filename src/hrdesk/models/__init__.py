"""Model exports.

Import from here: `from src.hrdesk.models import Company, Person`
"""

from src.hrdesk.models.ccnl import CCNL, SalaryTable
from src.hrdesk.models.company import Company, CompanyBase
from src.hrdesk.models.person import Person
from src.hrdesk.models.tenant import Tenant, User

__all__ = [
    # Tenancy
    "Tenant",
    "User",
    # Company aggregate
    "Company",
    "CompanyBase",
    "Person",
    # Reference data
    "CCNL",
    "SalaryTable",
]
