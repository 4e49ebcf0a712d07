"""Transaction endpoints for the API."""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.exceptions import NotFoundError
from components.core.init_db import get_db
from components.core.schemas import Message
from components.transaction.repository import TransactionRepository
from components.transaction import schemas

router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.Transaction])
async def read_transactions(db: AsyncSession = Depends(get_db)):
    """Get all transactions, most recent first."""
    repo = TransactionRepository(db)
    return await repo.get_all()


@router.get("/{transaction_id}", response_model=schemas.Transaction)
async def read_transaction(transaction_id: int, db: AsyncSession = Depends(get_db)):
    """Get a specific transaction by ID."""
    repo = TransactionRepository(db)
    transaction = await repo.get_by_id(transaction_id)
    if transaction is None:
        raise NotFoundError("Transaction not found")
    return transaction


@router.post("", response_model=schemas.Transaction, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction: schemas.TransactionCreate,
    db: AsyncSession = Depends(get_db)
):
    """
    Record a new transaction.

    - category: "revenu" or "depense" (case-insensitive)
    - amount: non-zero number
    - description: optional
    - date: optional, defaults to the current time
    """
    repo = TransactionRepository(db)
    return await repo.create(transaction)


@router.put("/{transaction_id}", response_model=schemas.Transaction)
async def update_transaction(
    transaction_id: int,
    transaction: schemas.TransactionUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Replace category, amount and description of a transaction."""
    repo = TransactionRepository(db)
    updated = await repo.update(transaction_id, transaction)
    if not updated:
        raise NotFoundError("Transaction not found")
    return updated


@router.delete("/{transaction_id}", response_model=Message)
async def delete_transaction(transaction_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a transaction."""
    repo = TransactionRepository(db)
    if not await repo.delete(transaction_id):
        raise NotFoundError("Transaction not found")
    return Message(message="Transaction deleted")
