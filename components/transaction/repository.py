"""Repository for transaction operations."""

import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.timeutils import utc_now
from components.transaction.models import Transaction, Category
from components.transaction.schemas import TransactionCreate, TransactionUpdate

logger = logging.getLogger(__name__)


class TransactionRepository:
    """Repository for transaction operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, transaction: TransactionCreate) -> Transaction:
        """Create a new transaction, stamping the current time if no date is given."""
        db_transaction = Transaction(
            category=Category.parse(transaction.category),
            amount=transaction.amount,
            description=transaction.description,
            date=transaction.date or utc_now(),
        )
        self.session.add(db_transaction)
        await self.session.commit()
        await self.session.refresh(db_transaction)
        logger.info(
            "Created transaction %s (%s %s)",
            db_transaction.id, db_transaction.category.value, db_transaction.amount,
        )
        return db_transaction

    async def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        result = await self.session.execute(
            select(Transaction).where(Transaction.id == transaction_id)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> List[Transaction]:
        """Get all transactions, most recent first."""
        result = await self.session.execute(
            select(Transaction).order_by(Transaction.date.desc(), Transaction.id.desc())
        )
        return list(result.scalars().all())

    async def update(self, transaction_id: int, transaction: TransactionUpdate) -> Optional[Transaction]:
        """Replace category, amount and description of a transaction."""
        db_transaction = await self.get_by_id(transaction_id)
        if not db_transaction:
            return None

        db_transaction.category = Category.parse(transaction.category)
        db_transaction.amount = transaction.amount
        db_transaction.description = transaction.description

        await self.session.commit()
        await self.session.refresh(db_transaction)
        logger.info("Updated transaction %s", transaction_id)
        return db_transaction

    async def delete(self, transaction_id: int) -> bool:
        """Delete transaction by ID."""
        db_transaction = await self.get_by_id(transaction_id)
        if not db_transaction:
            return False

        await self.session.delete(db_transaction)
        await self.session.commit()
        logger.info("Deleted transaction %s", transaction_id)
        return True
