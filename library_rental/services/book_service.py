"""
Book Service.

WHAT: Catalogue registration and copy-counter maintenance.

WHY: Reservations and returns never touch the counters directly; they
go through decrease_available_quantity and increase_available_quantity
so the non-negative rule lives in one place.
"""

import logging
from decimal import Decimal
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from library_rental.core.exceptions import AppException
from library_rental.dao.book import BookDAO
from library_rental.models.book import Book
from library_rental.schemas.book import BookCreateRequest, BookResponse

logger = logging.getLogger(__name__)


class BookService:
    """Service for books and their availability."""

    def __init__(self, session: AsyncSession):
        """
        Initialize BookService.

        Args:
            session: Async database session
        """
        self.session = session
        self.book_dao = BookDAO(session)

    async def create_book(
        self,
        external_id: int,
        title: str,
        price: Optional[Decimal],
        stock_quantity: int,
        author_name: Optional[str] = None,
    ) -> Book:
        """
        Add a book to the catalogue with every copy available.

        Args:
            external_id: Catalogue identifier used by callers
            title: Book title
            price: Daily rental price (None means free)
            stock_quantity: Copies owned
            author_name: Optional author

        Returns:
            Created Book

        Raises:
            AppException: If the external ID is taken or the stock is negative
        """
        if stock_quantity < 0:
            raise AppException(
                message="Stock quantity cannot be negative",
                stock_quantity=stock_quantity,
            )
        if await self.book_dao.exists(external_id=external_id):
            raise AppException(
                message=f"A book with external ID {external_id} already exists",
                book_external_id=external_id,
            )

        book = await self.book_dao.create(
            external_id=external_id,
            title=title,
            author_name=author_name,
            price=price,
            stock_quantity=stock_quantity,
            available_quantity=stock_quantity,
        )
        logger.info(
            f"Added book {external_id} with {stock_quantity} copies",
            extra={"book_external_id": external_id},
        )
        return book

    async def register(self, request: BookCreateRequest) -> BookResponse:
        """Add a book from a validated request record."""
        book = await self.create_book(
            external_id=request.external_id,
            title=request.title,
            price=request.price,
            stock_quantity=request.stock_quantity,
            author_name=request.author_name,
        )
        return BookResponse.model_validate(book)

    async def get_book_by_external_id(self, external_id: int) -> Book:
        """
        Get a book by catalogue identifier.

        Raises:
            AppException: If no book has this external ID
        """
        book = await self.book_dao.get_by_external_id(external_id)
        if not book:
            raise AppException(
                message=f"Book not found with external ID: {external_id}",
                book_external_id=external_id,
            )
        return book

    async def decrease_available_quantity(self, external_id: int) -> Book:
        """
        Take one copy out of circulation.

        Raises:
            AppException: If the book is missing or no copies are left
        """
        book = await self.get_book_by_external_id(external_id)
        if not book.is_available:
            raise AppException(
                message=f"No copies available for book {external_id}",
                book_external_id=external_id,
            )
        return await self.book_dao.adjust_available_quantity(book, -1)

    async def increase_available_quantity(self, external_id: int) -> Book:
        """
        Put one copy back into circulation.

        Raises:
            AppException: If the book is missing
        """
        book = await self.get_book_by_external_id(external_id)
        return await self.book_dao.adjust_available_quantity(book, 1)
