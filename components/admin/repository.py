"""Repository for admin operations."""

import logging
from typing import List, Optional
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from components.admin.models import Admin
from components.admin import schemas
from components.core.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)


class AdminRepository:
    """Repository for admin operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, admin: schemas.AdminCreate) -> Admin:
        """Create a new admin."""
        db_admin = Admin(
            email=admin.email,
            password=get_password_hash(admin.password),
        )
        self.session.add(db_admin)
        await self.session.commit()
        await self.session.refresh(db_admin)
        logger.info("Created admin %s", db_admin.id)
        return db_admin

    async def get_by_id(self, admin_id: int) -> Optional[Admin]:
        """Get admin by ID."""
        result = await self.session.execute(
            select(Admin).where(Admin.id == admin_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[Admin]:
        """Get admin by email."""
        result = await self.session.execute(
            select(Admin).where(Admin.email == email)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> List[schemas.Admin]:
        """Get all admins in creation order, flagging the super admin."""
        result = await self.session.execute(select(Admin).order_by(Admin.id))
        admins = list(result.scalars().all())
        super_admin_id = admins[0].id if admins else None
        return [
            schemas.Admin(id=admin.id, email=admin.email, is_super_admin=admin.id == super_admin_id)
            for admin in admins
        ]

    async def count(self) -> int:
        """Number of admin accounts."""
        result = await self.session.execute(select(func.count(Admin.id)))
        return result.scalar_one()

    async def get_super_admin_id(self) -> Optional[int]:
        """ID of the first created admin, which can never be deleted."""
        result = await self.session.execute(select(func.min(Admin.id)))
        return result.scalar_one_or_none()

    async def authenticate(self, email: str, password: str) -> Optional[Admin]:
        """Return the admin when the password matches, None otherwise."""
        db_admin = await self.get_by_email(email)
        if not db_admin or not verify_password(password, db_admin.password):
            return None
        return db_admin

    async def delete(self, admin_id: int) -> bool:
        """Delete admin by ID."""
        db_admin = await self.get_by_id(admin_id)
        if not db_admin:
            return False

        await self.session.delete(db_admin)
        await self.session.commit()
        logger.info("Deleted admin %s", admin_id)
        return True

    async def exists(self, email: str) -> bool:
        """Check if admin with given email exists."""
        result = await self.session.execute(
            select(Admin.id).where(Admin.email == email)
        )
        return result.scalar_one_or_none() is not None
