"""
Book model.

WHAT: SQLAlchemy model for a lendable title and its copy counters.

WHY: Books are looked up by the identifier of the external catalogue they
were imported from (external_id), not by the local primary key. The
available_quantity counter is decremented on every reservation and
incremented on every return.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import (
    BigInteger,
    Integer,
    String,
    DateTime,
    Numeric,
    CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from library_rental.models.base import Base


class Book(Base):
    """
    Lendable book.

    HOW: price doubles as the daily rental rate. It is nullable because
    catalogue imports do not always carry one; a missing price makes every
    fee for the book zero.
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    external_id: Mapped[int] = mapped_column(BigInteger, nullable=False, unique=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    price: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)

    # Copy counters
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    available_quantity: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True, default=0
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False
    )

    __table_args__ = (
        CheckConstraint(
            "stock_quantity >= 0",
            name="ck_books_non_negative_stock",
        ),
        CheckConstraint(
            "available_quantity IS NULL OR available_quantity >= 0",
            name="ck_books_non_negative_available",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<Book(id={self.id}, "
            f"external_id={self.external_id}, "
            f"available={self.available_quantity})>"
        )

    @property
    def is_available(self) -> bool:
        """Check if at least one copy can be lent."""
        return (self.available_quantity or 0) > 0
