"""Repository for activity operations."""

import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.activity.models import Activity
from components.report.filters import activity_status
from components.activity import schemas

logger = logging.getLogger(__name__)


def to_schema(activity: Activity, now: datetime) -> schemas.Activity:
    """Read model of an activity with its status as of ``now``."""
    return schemas.Activity(
        id=activity.id,
        title=activity.title,
        start=activity.start,
        end=activity.end,
        description=activity.description,
        status=activity_status(activity.start, activity.end, now),
    )


class ActivityRepository:
    """Repository for activity operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, activity: schemas.ActivityCreate) -> Activity:
        """Create a new activity."""
        db_activity = Activity(
            title=activity.title,
            start=activity.start,
            end=activity.end,
            description=activity.description,
        )
        self.session.add(db_activity)
        await self.session.commit()
        await self.session.refresh(db_activity)
        logger.info("Created activity %s (%s)", db_activity.id, db_activity.title)
        return db_activity

    async def get_by_id(self, activity_id: int) -> Optional[Activity]:
        """Get activity by ID."""
        result = await self.session.execute(
            select(Activity).where(Activity.id == activity_id)
        )
        return result.scalar_one_or_none()

    async def get_all(self) -> List[Activity]:
        """Get all activities ordered by start."""
        result = await self.session.execute(
            select(Activity).order_by(Activity.start.asc(), Activity.id.asc())
        )
        return list(result.scalars().all())

    async def update(self, activity_id: int, activity: schemas.ActivityUpdate) -> Optional[Activity]:
        """Update activity by ID."""
        db_activity = await self.get_by_id(activity_id)
        if not db_activity:
            return None

        db_activity.title = activity.title
        db_activity.start = activity.start
        db_activity.end = activity.end
        db_activity.description = activity.description

        await self.session.commit()
        await self.session.refresh(db_activity)
        logger.info("Updated activity %s", activity_id)
        return db_activity

    async def delete(self, activity_id: int) -> bool:
        """Delete activity by ID."""
        db_activity = await self.get_by_id(activity_id)
        if not db_activity:
            return False

        await self.session.delete(db_activity)
        await self.session.commit()
        logger.info("Deleted activity %s", activity_id)
        return True
