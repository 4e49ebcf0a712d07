import asyncio

from fastapi.testclient import TestClient

from restapi.router import create_app
from scripts.seed_data import DEMO_PASSWORD, seed_data


def test_seed_data_builds_demo_ledger(db_manager):
    asyncio.run(seed_data(db_manager))
    # Seeding twice resets instead of duplicating
    asyncio.run(seed_data(db_manager))

    with TestClient(create_app(db_manager=db_manager)) as client:
        admins = client.get("/admins").json()
        assert [a["is_super_admin"] for a in admins] == [True]

        assert [u["email"] for u in client.get("/users/pending").json()] == ["nurse@clinic.mg"]
        login = client.post("/login", json={"email": "doctor@clinic.mg", "password": DEMO_PASSWORD})
        assert login.status_code == 200

        summary = client.get("/reports/summary").json()
        assert summary["revenue_count"] == 14
        assert summary["expense_count"] == 5
        assert summary["expense_total"] == 75000

        statuses = [a["status"] for a in client.get("/activites").json()]
        assert statuses == ["finished", "ongoing", "upcoming"]
