"""Unit tests for UserService."""

import pytest

from library_rental.core.exceptions import AppException
from library_rental.schemas.user import UserCreateRequest, UserResponse
from library_rental.services.user_service import UserService


class TestUserService:
    """Tests for member registration and lookup."""

    @pytest.mark.asyncio
    async def test_create_user(self, db_session, sample_user_data):
        """Test registering a member."""
        service = UserService(db_session)

        user = await service.create_user(**sample_user_data)

        assert user.id is not None
        assert user.name == "Juan Pérez"
        assert user.email == "juan@example.com"
        assert user.created_at is not None

    @pytest.mark.asyncio
    async def test_create_user_normalizes_email(self, db_session):
        """Test emails are stored lowercase."""
        service = UserService(db_session)

        user = await service.create_user(name="Ana", email="  Ana@Example.COM ")

        assert user.email == "ana@example.com"

    @pytest.mark.asyncio
    async def test_create_user_duplicate_email(self, db_session, sample_user_data):
        """Test an email can only be registered once."""
        service = UserService(db_session)
        await service.create_user(**sample_user_data)

        with pytest.raises(AppException) as exc_info:
            await service.create_user(name="Someone Else", email="JUAN@example.com")

        assert "already exists" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_get_user_entity(self, db_session, test_user):
        """Test fetching a member by ID."""
        service = UserService(db_session)

        user = await service.get_user_entity(test_user.id)

        assert user.id == test_user.id

    @pytest.mark.asyncio
    async def test_get_user_entity_not_found(self, db_session):
        """Test fetching an unknown member fails."""
        service = UserService(db_session)

        with pytest.raises(AppException) as exc_info:
            await service.get_user_entity(999)

        assert exc_info.value.message == "User not found with ID: 999"

    @pytest.mark.asyncio
    async def test_register_from_request(self, db_session, sample_user_data):
        """Test registering from a request record returns a response record."""
        service = UserService(db_session)

        response = await service.register(UserCreateRequest(**sample_user_data))

        assert isinstance(response, UserResponse)
        assert response.email == "juan@example.com"
        assert response.phone == sample_user_data["phone"]
