"""Book Pydantic Schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


class BookCreateRequest(BaseModel):
    """Request schema for adding a book to the catalogue."""

    external_id: int = Field(..., description="Catalogue ID")
    title: str = Field(..., min_length=1, max_length=500, description="Book title")
    author_name: Optional[str] = Field(None, max_length=255, description="Author")
    price: Optional[Decimal] = Field(None, ge=0, description="Daily rental price")
    stock_quantity: int = Field(default=1, ge=0, description="Copies owned")


class BookResponse(BaseModel):
    """Response schema for a book."""

    id: int
    external_id: int
    title: str
    author_name: Optional[str] = None
    price: Optional[Decimal] = None
    stock_quantity: int
    available_quantity: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
