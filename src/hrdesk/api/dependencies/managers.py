"""Manager factory dependencies.

Every manager of a request shares the request's session.
"""

from typing import Annotated

from fastapi import Depends

from src.hrdesk.api.dependencies.context import Caller
from src.hrdesk.api.dependencies.db import DBSession
from src.hrdesk.managers import CCNLManager, CompanyManager, PersonManager, UserManager


def get_company_manager(session: DBSession, caller: Caller) -> CompanyManager:
    return CompanyManager(session, caller)


def get_person_manager(session: DBSession, caller: Caller) -> PersonManager:
    return PersonManager(session, caller)


def get_user_manager(session: DBSession, caller: Caller) -> UserManager:
    return UserManager(session, caller)


def get_ccnl_manager(session: DBSession, _caller: Caller) -> CCNLManager:
    """CCNL data is shared, but only authenticated tenants may read it."""
    return CCNLManager(session)


CompanyManagerDep = Annotated[CompanyManager, Depends(get_company_manager)]
PersonManagerDep = Annotated[PersonManager, Depends(get_person_manager)]
UserManagerDep = Annotated[UserManager, Depends(get_user_manager)]
CCNLManagerDep = Annotated[CCNLManager, Depends(get_ccnl_manager)]
