"""Activity endpoints for the API."""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from components.activity.repository import ActivityRepository, to_schema
from components.activity import schemas
from components.core.exceptions import NotFoundError
from components.core.init_db import get_db
from components.core.schemas import Message
from components.core.timeutils import utc_now

router = APIRouter(
    prefix="/activites",
    tags=["activities"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.Activity])
async def read_activities(db: AsyncSession = Depends(get_db)):
    """Get all activities ordered by start, each with its current status."""
    repo = ActivityRepository(db)
    now = utc_now()
    return [to_schema(activity, now) for activity in await repo.get_all()]


@router.get("/{activity_id}", response_model=schemas.Activity)
async def read_activity(activity_id: int, db: AsyncSession = Depends(get_db)):
    """Get a specific activity by ID."""
    repo = ActivityRepository(db)
    activity = await repo.get_by_id(activity_id)
    if activity is None:
        raise NotFoundError("Activity not found")
    return to_schema(activity, utc_now())


@router.post("", response_model=schemas.Activity, status_code=status.HTTP_201_CREATED)
async def create_activity(
    activity: schemas.ActivityCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create an activity; title, start and end are required and start must precede end."""
    repo = ActivityRepository(db)
    return to_schema(await repo.create(activity), utc_now())


@router.put("/{activity_id}", response_model=schemas.Activity)
async def update_activity(
    activity_id: int,
    activity: schemas.ActivityUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update an activity."""
    repo = ActivityRepository(db)
    updated = await repo.update(activity_id, activity)
    if not updated:
        raise NotFoundError("Activity not found")
    return to_schema(updated, utc_now())


@router.delete("/{activity_id}", response_model=Message)
async def delete_activity(activity_id: int, db: AsyncSession = Depends(get_db)):
    """Delete an activity."""
    repo = ActivityRepository(db)
    if not await repo.delete(activity_id):
        raise NotFoundError("Activity not found")
    return Message(message="Activity deleted")
