"""
User Service.

WHAT: Registration and lookup of library members.
"""

import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from library_rental.core.exceptions import AppException
from library_rental.dao.user import UserDAO
from library_rental.models.user import User
from library_rental.schemas.user import UserCreateRequest, UserResponse

logger = logging.getLogger(__name__)


class UserService:
    """Service for library members."""

    def __init__(self, session: AsyncSession):
        """
        Initialize UserService.

        Args:
            session: Async database session
        """
        self.session = session
        self.user_dao = UserDAO(session)

    async def create_user(
        self,
        name: str,
        email: str,
        phone: Optional[str] = None,
    ) -> User:
        """
        Register a new member.

        Args:
            name: Display name
            email: Email address (stored lowercase, must be unique)
            phone: Optional phone number

        Returns:
            Created User

        Raises:
            AppException: If the email is already registered
        """
        email = email.strip().lower()
        if await self.user_dao.exists(email=email):
            raise AppException(
                message=f"A user with email {email} already exists",
                email=email,
            )

        user = await self.user_dao.create(name=name, email=email, phone=phone)
        logger.info(f"Registered user {user.id}", extra={"user_id": user.id})
        return user

    async def get_user_entity(self, user_id: int) -> User:
        """
        Get a member by ID.

        Raises:
            AppException: If no user has this ID
        """
        user = await self.user_dao.get_by_id(user_id)
        if not user:
            raise AppException(
                message=f"User not found with ID: {user_id}",
                user_id=user_id,
            )
        return user

    async def register(self, request: UserCreateRequest) -> UserResponse:
        """Register a member from a validated request record."""
        user = await self.create_user(
            name=request.name,
            email=request.email,
            phone=request.phone,
        )
        return UserResponse.model_validate(user)
