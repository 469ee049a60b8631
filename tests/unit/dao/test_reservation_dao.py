"""
Unit tests for Reservation DAO.

WHAT: Tests for ReservationDAO, BookDAO and the shared BaseDAO methods.

HOW: Uses pytest-asyncio with in-memory SQLite database for isolation.
"""

import pytest
from datetime import date
from decimal import Decimal
from sqlalchemy.exc import IntegrityError

from library_rental.dao.book import BookDAO
from library_rental.dao.reservation import ReservationDAO
from library_rental.dao.user import UserDAO
from library_rental.models.reservation import ReservationStatus
from tests.factories import BookFactory, ReservationFactory, UserFactory


class TestReservationDAOCreate:
    """Tests for reservation creation."""

    @pytest.mark.asyncio
    async def test_create_loads_relations(self, db_session, test_user, test_book):
        """Test created reservations carry their user and book."""
        dao = ReservationDAO(db_session)

        reservation = await dao.create(
            user=test_user,
            book=test_book,
            rental_days=2,
            start_date=date(2024, 1, 1),
            expected_return_date=date(2024, 1, 3),
            daily_rate=test_book.price,
            total_fee=Decimal("31.98"),
        )

        assert reservation.id is not None
        assert reservation.user_id == test_user.id
        assert reservation.book.external_id == test_book.external_id
        assert reservation.status == ReservationStatus.ACTIVE
        assert reservation.late_fee == Decimal("0")
        assert reservation.is_active
        assert not reservation.is_returned
        assert reservation.created_at is not None

    @pytest.mark.asyncio
    async def test_create_rejects_zero_rental_days(self, db_session, test_user, test_book):
        """Test the rental period must be at least one day."""
        dao = ReservationDAO(db_session)

        with pytest.raises(IntegrityError):
            await dao.create(
                user=test_user,
                book=test_book,
                rental_days=0,
                start_date=date(2024, 1, 1),
                expected_return_date=date(2024, 1, 1),
            )


class TestReservationDAOQueries:
    """Tests for reservation lookups."""

    @pytest.mark.asyncio
    async def test_get_by_user(self, db_session, test_user, test_book):
        """Test filtering by user."""
        other = await UserFactory.create(db_session, email="other@example.com")
        mine = await ReservationFactory.create(db_session, user=test_user, book=test_book)
        await ReservationFactory.create(db_session, user=other, book=test_book)

        result = await ReservationDAO(db_session).get_by_user(test_user.id)

        assert [r.id for r in result] == [mine.id]

    @pytest.mark.asyncio
    async def test_get_by_status_accepts_string(self, db_session, test_user, test_book):
        """Test filtering by status given as its value."""
        returned = await ReservationFactory.create(
            db_session, user=test_user, book=test_book, status=ReservationStatus.RETURNED
        )
        await ReservationFactory.create(db_session, user=test_user, book=test_book)

        result = await ReservationDAO(db_session).get_by_status("RETURNED")

        assert [r.id for r in result] == [returned.id]
        assert result[0].is_returned

    @pytest.mark.asyncio
    async def test_get_overdue_ordered_by_due_date(self, db_session, test_user, test_book):
        """Test overdue reservations come back earliest due first."""
        later = await ReservationFactory.create(
            db_session, user=test_user, book=test_book, start_date=date(2024, 1, 5)
        )
        earlier = await ReservationFactory.create(
            db_session, user=test_user, book=test_book, start_date=date(2024, 1, 1)
        )

        result = await ReservationDAO(db_session).get_overdue(date(2024, 2, 1))

        assert [r.id for r in result] == [earlier.id, later.id]

    @pytest.mark.asyncio
    async def test_get_overdue_excludes_due_today(self, db_session, test_user, test_book):
        """Test a reservation due on the reference date is not overdue yet."""
        await ReservationFactory.create(
            db_session, user=test_user, book=test_book, start_date=date(2024, 1, 1)
        )

        result = await ReservationDAO(db_session).get_overdue(date(2024, 1, 8))

        assert result == []


class TestBookDAO:
    """Tests for book lookups and counters."""

    @pytest.mark.asyncio
    async def test_get_by_external_id(self, db_session, test_book):
        """Test looking up a book by catalogue ID."""
        book = await BookDAO(db_session).get_by_external_id(258027)

        assert book.id == test_book.id
        assert book.is_available

    @pytest.mark.asyncio
    async def test_get_by_external_id_missing(self, db_session):
        """Test an unknown catalogue ID returns None."""
        assert await BookDAO(db_session).get_by_external_id(1) is None

    @pytest.mark.asyncio
    async def test_adjust_available_quantity(self, db_session):
        """Test adding and removing copies."""
        book = await BookFactory.create(db_session, stock_quantity=2)
        dao = BookDAO(db_session)

        book = await dao.adjust_available_quantity(book, -2)
        assert book.available_quantity == 0
        assert not book.is_available

        book = await dao.adjust_available_quantity(book, 1)
        assert book.available_quantity == 1

    @pytest.mark.asyncio
    async def test_available_quantity_cannot_go_negative(self, db_session):
        """Test the check constraint rejects a negative counter."""
        book = await BookFactory.create(db_session, stock_quantity=1, available_quantity=0)

        with pytest.raises(IntegrityError):
            await BookDAO(db_session).adjust_available_quantity(book, -1)


class TestBaseDAO:
    """Tests for shared DAO helpers."""

    @pytest.mark.asyncio
    async def test_get_by_field_unknown_field(self, db_session):
        """Test an unknown field name is an error."""
        with pytest.raises(AttributeError):
            await UserDAO(db_session).get_by_field("nickname", "x")

    @pytest.mark.asyncio
    async def test_exists(self, db_session, test_user):
        """Test existence checks by field."""
        dao = UserDAO(db_session)

        assert await dao.exists(email="test@example.com")
        assert not await dao.exists(email="nobody@example.com")

    @pytest.mark.asyncio
    async def test_get_by_email_is_case_insensitive(self, db_session, test_user):
        """Test email lookups ignore case."""
        user = await UserDAO(db_session).get_by_email("TEST@example.com")

        assert user.id == test_user.id

    @pytest.mark.asyncio
    async def test_get_all_pagination(self, db_session):
        """Test skip and limit on listings."""
        for i in range(5):
            await UserFactory.create(db_session, email=f"user{i}@example.com")

        page = await UserDAO(db_session).get_all(skip=1, limit=2)

        assert [u.email for u in page] == ["user1@example.com", "user2@example.com"]
