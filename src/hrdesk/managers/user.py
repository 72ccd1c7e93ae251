"""Users of a tenant."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.hrdesk.core.context import CallerContext
from src.hrdesk.core.errors import ConflictError, NotFoundError
from src.hrdesk.core.logging import get_logger
from src.hrdesk.managers.base import validate_payload
from src.hrdesk.managers.customer import BaseCustomerManager
from src.hrdesk.managers.query import Where, text_search
from src.hrdesk.models import User
from src.hrdesk.models.base import utc_now
from src.hrdesk.schemas.pagination import QueryPage
from src.hrdesk.schemas.user import UserCreate, UserUpdate

logger = get_logger(__name__)


class UserManager:
    """Tenant-scoped users. Emails are unique within a tenant."""

    def __init__(self, session: AsyncSession, caller: CallerContext | None):
        self.records = BaseCustomerManager(session, caller)

    async def add(self, payload: UserCreate | Mapping[str, Any]) -> User:
        model = validate_payload(UserCreate, payload)
        email = str(model.email).lower()
        if await self.get_by_email(email) is not None:
            raise ConflictError(f"A user with email '{email}' already exists")

        user = User(email=email, full_name=model.full_name)
        await self.records.save(user)
        logger.info("User created", user_id=user.id)
        return user

    async def update(self, user_id: int, payload: UserUpdate | Mapping[str, Any]) -> User:
        """Apply the fields present in the payload."""
        model = validate_payload(UserUpdate, payload)
        user = await self.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")

        update_data = model.model_dump(exclude_unset=True)
        if update_data.get("email") is not None:
            email = str(update_data["email"]).lower()
            if email != user.email and await self.get_by_email(email) is not None:
                raise ConflictError(f"A user with email '{email}' already exists")
            update_data["email"] = email

        for field, value in update_data.items():
            if value is not None:
                setattr(user, field, value)

        user.updated_at = utc_now()
        await self.records.save(user)
        logger.info("User updated", user_id=user.id)
        return user

    async def get_by_id(self, user_id: int) -> User | None:
        return await self.records.get_by_id(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        return await self.records.find_one(User, Where(User.email == email.lower()))

    async def list(
        self,
        search: str | None = None,
        page: int | None = None,
        page_limit: int | None = None,
    ) -> QueryPage[User]:
        return await self.records.list(
            User,
            text_search(search, User.email, User.full_name),
            page=page,
            page_limit=page_limit,
        )

    async def delete(self, user_id: int) -> None:
        await self.records.delete(User, user_id)
        logger.info("User deleted", user_id=user_id)
