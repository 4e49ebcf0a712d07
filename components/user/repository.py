"""Repository for user operations."""

import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.user.models import User
from components.user.schemas import UserCreate
from components.core.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for user operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, user: UserCreate) -> User:
        """Create a new, not yet approved, user."""
        db_user = User(
            email=user.email,
            password=get_password_hash(user.password),
            is_approved=False,
        )
        self.session.add(db_user)
        await self.session.commit()
        await self.session.refresh(db_user)
        logger.info("Registered user %s pending approval", db_user.id)
        return db_user

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        result = await self.session.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        result = await self.session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> List[User]:
        """Get all users."""
        result = await self.session.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    async def get_pending(self) -> List[User]:
        """Get users waiting for approval."""
        result = await self.session.execute(
            select(User).where(User.is_approved.is_(False)).order_by(User.id)
        )
        return list(result.scalars().all())

    async def approve(self, user_id: int) -> Optional[User]:
        """Mark user as approved; approving twice leaves the user unchanged."""
        db_user = await self.get_by_id(user_id)
        if not db_user:
            return None

        if not db_user.is_approved:
            db_user.is_approved = True
            await self.session.commit()
            await self.session.refresh(db_user)
            logger.info("Approved user %s", user_id)
        return db_user

    async def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user when the password matches, None otherwise."""
        db_user = await self.get_by_email(email)
        if not db_user or not verify_password(password, db_user.password):
            return None
        return db_user

    async def delete(self, user_id: int) -> bool:
        """Delete user by ID."""
        db_user = await self.get_by_id(user_id)
        if not db_user:
            return False

        await self.session.delete(db_user)
        await self.session.commit()
        logger.info("Deleted user %s", user_id)
        return True

    async def exists(self, email: str) -> bool:
        """Check if user with given email exists."""
        result = await self.session.execute(
            select(User.id).where(User.email == email)
        )
        return result.scalar_one_or_none() is not None
