"""Admin endpoints for the API."""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from components.admin.repository import AdminRepository
from components.admin import schemas
from components.core.config import get_settings
from components.core.exceptions import AuthError, ForbiddenError, NotFoundError, ValidationError
from components.core.init_db import get_db
from components.core.schemas import Message
from components.user.schemas import Credentials

router = APIRouter(
    prefix="/admins",
    tags=["admins"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.Admin])
async def read_admins(db: AsyncSession = Depends(get_db)):
    """Get all admins; the first created one is flagged as super admin."""
    repo = AdminRepository(db)
    return await repo.get_all()


@router.post("", response_model=schemas.AdminPublic, status_code=status.HTTP_201_CREATED)
async def create_admin(
    admin: schemas.AdminCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create an admin, up to the configured maximum."""
    repo = AdminRepository(db)
    max_admins = get_settings().MAX_ADMINS

    if await repo.count() >= max_admins:
        raise ValidationError(f"Maximum number of administrators reached ({max_admins})")
    if await repo.exists(admin.email):
        raise ValidationError("This email already exists")

    try:
        return await repo.create(admin)
    except IntegrityError:
        await db.rollback()
        raise ValidationError("This email already exists")


@router.post("/login", response_model=schemas.AdminLoginResponse)
async def login_admin(
    credentials: Credentials,
    db: AsyncSession = Depends(get_db)
):
    """Check admin credentials."""
    repo = AdminRepository(db)
    admin = await repo.authenticate(credentials.email, credentials.password)
    if admin is None:
        raise AuthError("Incorrect email or password")
    return schemas.AdminLoginResponse(
        message="Admin login successful",
        admin=schemas.AdminPublic.model_validate(admin),
    )


@router.delete("/{admin_id}", response_model=Message)
async def delete_admin(admin_id: int, db: AsyncSession = Depends(get_db)):
    """Delete an admin. The super admin cannot be deleted."""
    repo = AdminRepository(db)
    if await repo.get_by_id(admin_id) is None:
        raise NotFoundError("Admin not found")
    if admin_id == await repo.get_super_admin_id():
        raise ForbiddenError("The super admin cannot be deleted")

    if not await repo.delete(admin_id):
        raise NotFoundError("Admin not found")
    return Message(message="Admin deleted")
