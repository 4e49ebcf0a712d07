"""Script to seed demo data into the database."""

import asyncio
import logging
from datetime import datetime, timedelta
from typing import Optional

from components.activity.models import Activity
from components.admin.models import Admin
from components.core.database import DatabaseManager
from components.core.log_config import configure_logging
from components.core.security import get_password_hash
from components.core.timeutils import utc_now
from components.transaction.models import Category, Transaction
from components.user.models import User

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"


async def seed_data(db_manager: Optional[DatabaseManager] = None, today: Optional[datetime] = None) -> None:
    """Reset the tables and fill them with a small demo clinic ledger."""
    db_manager = db_manager or DatabaseManager()
    today = today or utc_now()

    await db_manager.create_all()
    async with db_manager.get_db() as db:
        # Clear existing data
        for model in (Transaction, Activity, User, Admin):
            await db.execute(model.__table__.delete())
        await db.commit()

        # The first admin created becomes the super admin
        db.add(Admin(email="admin@clinic.mg", password=get_password_hash(DEMO_PASSWORD)))
        await db.commit()

        users = [
            User(email="doctor@clinic.mg", password=get_password_hash(DEMO_PASSWORD), is_approved=True),
            User(email="nurse@clinic.mg", password=get_password_hash(DEMO_PASSWORD), is_approved=False),
        ]
        db.add_all(users)
        await db.commit()

        # Two weeks of consultations and supply purchases
        for days_ago in range(14):
            day = today - timedelta(days=days_ago)
            db.add(Transaction(
                category=Category.revenue,
                amount=25000 + days_ago * 1000,
                description="Consultations",
                date=day,
            ))
            if days_ago % 3 == 0:
                db.add(Transaction(
                    category=Category.expense,
                    amount=15000,
                    description="Medical supplies",
                    date=day + timedelta(hours=6),
                ))
        await db.commit()

        activities = [
            Activity(title="Vaccination campaign", start=today - timedelta(days=10),
                     end=today - timedelta(days=9), description="Children under 5"),
            Activity(title="Blood drive", start=today - timedelta(hours=1),
                     end=today + timedelta(hours=8)),
            Activity(title="Free screening day", start=today + timedelta(days=7),
                     end=today + timedelta(days=7, hours=8)),
        ]
        db.add_all(activities)
        await db.commit()

    logger.info("Seeded %d users, 1 admin and %d activities", len(users), len(activities))


async def main() -> None:
    configure_logging("INFO")
    db_manager = DatabaseManager()
    try:
        await seed_data(db_manager)
    finally:
        await db_manager.dispose()


if __name__ == "__main__":
    asyncio.run(main())
