"""Transaction model for the database."""

import enum

from sqlalchemy import Column, Integer, DateTime, Numeric, Text, Enum

from components.core.database import Base


class Category(str, enum.Enum):
    """Transaction category as stored and exchanged on the wire."""
    revenue = "revenu"
    expense = "depense"

    @classmethod
    def parse(cls, value) -> "Category":
        """Case-insensitive lookup by wire value; raises ValueError otherwise."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid category: {value!r}")
        return cls(value.strip().lower())


class Transaction(Base):
    """Money flow recorded by the clinic, either revenue or expense."""
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    category = Column(
        Enum(
            Category,
            name="transaction_category",
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
            validate_strings=True,
        ),
        nullable=False,
    )
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False, index=True)
