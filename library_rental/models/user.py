"""
User model.

WHY: Users are the people renting books. The rental service only needs
an identifier and display attributes, so the table stays small.
"""

from sqlalchemy import Column, String

from library_rental.models.base import Base, TimestampMixin, PrimaryKeyMixin


class User(Base, PrimaryKeyMixin, TimestampMixin):
    """User model representing a library member."""

    __tablename__ = "users"

    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    phone = Column(String(50), nullable=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
