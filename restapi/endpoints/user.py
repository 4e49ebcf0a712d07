"""User endpoints for the API."""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.exceptions import NotFoundError
from components.core.init_db import get_db
from components.core.schemas import Message
from components.user.repository import UserRepository
from components.user import schemas

router = APIRouter(
    prefix="/users",
    tags=["users"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.User])
async def read_users(db: AsyncSession = Depends(get_db)):
    """Get list of all users with their approval state."""
    repo = UserRepository(db)
    return await repo.get_all()


@router.get("/pending", response_model=List[schemas.User])
async def read_pending_users(db: AsyncSession = Depends(get_db)):
    """Get users waiting for administrator approval."""
    repo = UserRepository(db)
    return await repo.get_pending()


@router.put("/{user_id}/approve", response_model=Message)
async def approve_user(user_id: int, db: AsyncSession = Depends(get_db)):
    """Approve a user so they can log in."""
    repo = UserRepository(db)
    if not await repo.approve(user_id):
        raise NotFoundError("User not found")
    return Message(message="User approved")


@router.delete("/{user_id}", response_model=Message)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a user (rejects a pending registration)."""
    repo = UserRepository(db)
    if not await repo.delete(user_id):
        raise NotFoundError("User not found")
    return Message(message="User deleted")
