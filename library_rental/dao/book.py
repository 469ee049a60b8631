"""
Book Data Access Object (DAO).

WHAT: Lookups and counter updates for the Book model.

HOW: Callers identify books by external_id; the local primary key never
leaves the service layer.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from library_rental.dao.base import BaseDAO
from library_rental.models.book import Book


class BookDAO(BaseDAO[Book]):
    """Data Access Object for Book model."""

    def __init__(self, session: AsyncSession):
        """
        Initialize BookDAO.

        Args:
            session: Async database session
        """
        super().__init__(Book, session)

    async def get_by_external_id(self, external_id: int) -> Optional[Book]:
        """
        Get a book by its catalogue identifier.

        Args:
            external_id: External catalogue ID

        Returns:
            Book or None
        """
        return await self.get_by_field("external_id", external_id)

    async def adjust_available_quantity(self, book: Book, delta: int) -> Book:
        """
        Add delta to a book's available copies.

        No locking is taken: two concurrent callers can read the same
        counter value.

        Args:
            book: Loaded book instance
            delta: Copies to add (negative to remove)

        Returns:
            Updated book
        """
        book.available_quantity = (book.available_quantity or 0) + delta
        return await self.save(book)
