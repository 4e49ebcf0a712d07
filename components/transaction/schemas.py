"""Pydantic schemas for transaction data validation."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from components.core.timeutils import to_naive_utc
from components.transaction.models import Category


class TransactionBase(BaseModel):
    """Base transaction schema."""
    category: Category
    amount: Decimal = Field(max_digits=12, decimal_places=2, allow_inf_nan=False)
    description: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def normalize_category(cls, value):
        try:
            return Category.parse(value)
        except ValueError:
            raise ValueError('Category must be "depense" or "revenu"')

    @field_validator("amount")
    @classmethod
    def amount_not_zero(cls, value: Decimal) -> Decimal:
        if value == 0:
            raise ValueError("Amount must be non-zero")
        return value


class TransactionCreate(TransactionBase):
    """Schema for transaction creation; the store stamps the date when omitted."""
    date: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def as_naive_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(value)


class TransactionUpdate(TransactionBase):
    """Full replace of category, amount and description."""
    pass


class Transaction(BaseModel):
    """Schema for transaction response."""
    id: int
    category: Category
    amount: float
    description: Optional[str] = None
    date: datetime

    class Config:
        from_attributes = True
