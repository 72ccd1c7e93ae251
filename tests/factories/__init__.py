"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import TenantFactory, PersonFactory, ...
"""

from tests.factories.base import BaseFactory, generate_uuid, utc_now
from tests.factories.hr import (
    CCNLFactory,
    CompanyBaseFactory,
    CompanyFactory,
    PersonFactory,
    SalaryTableFactory,
)
from tests.factories.tenant import TenantFactory, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid",
    "utc_now",
    # Tenancy
    "TenantFactory",
    "UserFactory",
    # HR records
    "CompanyFactory",
    "CompanyBaseFactory",
    "PersonFactory",
    "CCNLFactory",
    "SalaryTableFactory",
]
