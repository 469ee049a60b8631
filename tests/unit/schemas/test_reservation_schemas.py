"""Tests for reservation request/response records."""

import pytest
from datetime import date
from decimal import Decimal
from pydantic import ValidationError

from library_rental.models.reservation import ReservationStatus
from library_rental.schemas.reservation import (
    ReservationCreateRequest,
    ReservationResponse,
    ReturnBookRequest,
)


class TestReservationCreateRequest:

    def test_parses_iso_date(self):
        request = ReservationCreateRequest(
            user_id=1, book_external_id=258027, rental_days=7, start_date="2024-05-01"
        )
        assert request.start_date == date(2024, 5, 1)

    @pytest.mark.parametrize("days", [0, -3])
    def test_rental_days_must_be_positive(self, days):
        with pytest.raises(ValidationError):
            ReservationCreateRequest(
                user_id=1, book_external_id=1, rental_days=days, start_date=date.today()
            )

    def test_start_date_required(self):
        with pytest.raises(ValidationError):
            ReservationCreateRequest(user_id=1, book_external_id=1, rental_days=3)


class TestReturnBookRequest:

    def test_return_date_required(self):
        with pytest.raises(ValidationError):
            ReturnBookRequest()


class TestReservationResponse:

    def test_status_from_value(self):
        response = ReservationResponse(
            id=1,
            rental_days=1,
            start_date=date(2024, 1, 1),
            expected_return_date=date(2024, 1, 2),
            total_fee=Decimal("1.00"),
            status="OVERDUE",
        )

        assert response.status == ReservationStatus.OVERDUE
        assert response.late_fee == Decimal("0")
        assert response.actual_return_date is None
