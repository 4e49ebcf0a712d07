"""Authentication endpoints for user registration and login."""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.exceptions import AuthError, ForbiddenError, ValidationError
from components.core.init_db import get_db
from components.core.schemas import Message
from components.user.repository import UserRepository
from components.user import schemas

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=Message)
async def register(
    user_in: schemas.UserCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a new user account awaiting administrator approval."""
    repo = UserRepository(db)

    if await repo.exists(user_in.email):
        raise ValidationError("User already exists")

    try:
        await repo.create(user_in)
    except IntegrityError:
        await db.rollback()
        raise ValidationError("User already exists")

    return Message(message="Account created. Waiting for administrator approval.")


@router.post("/login", response_model=schemas.LoginResponse)
async def login(
    credentials: schemas.Credentials,
    db: AsyncSession = Depends(get_db)
):
    """Check user credentials; only approved accounts may log in."""
    repo = UserRepository(db)
    user = await repo.authenticate(credentials.email, credentials.password)

    if user is None:
        logger.info("Rejected login for %s", credentials.email)
        raise AuthError("Incorrect email or password")
    if not user.is_approved:
        raise ForbiddenError("Account pending approval")

    return schemas.LoginResponse(
        message="Login successful",
        user=schemas.User.model_validate(user),
    )
