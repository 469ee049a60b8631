"""User DAO."""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from library_rental.dao.base import BaseDAO
from library_rental.models.user import User


class UserDAO(BaseDAO[User]):
    """Data Access Object for User model."""

    def __init__(self, session: AsyncSession):
        super().__init__(User, session)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by email (case-insensitive)."""
        return await self.get_by_field("email", email.lower())
