"""
Data Access Object (DAO) package.

WHY: DAOs provide a clean separation between database operations and the
rental rules in the service layer.
"""

from library_rental.dao.base import BaseDAO
from library_rental.dao.user import UserDAO
from library_rental.dao.book import BookDAO
from library_rental.dao.reservation import ReservationDAO

__all__ = [
    "BaseDAO",
    "UserDAO",
    "BookDAO",
    "ReservationDAO",
]
