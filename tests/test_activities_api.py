import pytest

PAST = {"title": "Vaccination day", "start": "2000-01-01T08:00:00", "end": "2000-01-01T17:00:00"}
FUTURE = {"title": "Free screening", "start": "2999-01-01T08:00:00", "end": "2999-01-02T17:00:00"}
CURRENT = {"title": "Blood drive", "start": "2000-01-01T08:00:00", "end": "2999-01-01T08:00:00"}


@pytest.mark.parametrize(
    "payload,status",
    [(PAST, "finished"), (FUTURE, "upcoming"), (CURRENT, "ongoing")],
)
def test_create_activity_reports_status(client, payload, status):
    response = client.post("/activites", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == payload["title"]
    assert body["status"] == status
    assert body["description"] is None


@pytest.mark.parametrize("missing", ["title", "start", "end"])
def test_create_activity_requires_fields(client, missing):
    payload = {key: value for key, value in PAST.items() if key != missing}

    response = client.post("/activites", json=payload)

    assert response.status_code == 400


def test_create_activity_rejects_blank_title(client):
    response = client.post("/activites", json={**PAST, "title": "   "})

    assert response.status_code == 400


def test_create_activity_rejects_end_before_start(client):
    payload = {**PAST, "start": PAST["end"], "end": PAST["start"]}

    response = client.post("/activites", json=payload)

    assert response.status_code == 400
    assert "before end" in response.json()["detail"]


def test_list_activities_ordered_by_start(client, make_activity):
    later = make_activity(**FUTURE)
    earlier = make_activity(**PAST)

    response = client.get("/activites")

    assert response.status_code == 200
    assert [a["id"] for a in response.json()] == [earlier["id"], later["id"]]


def test_get_activity(client, make_activity):
    created = make_activity(**PAST)

    response = client.get(f"/activites/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_update_activity(client, make_activity):
    created = make_activity(**PAST)

    response = client.put(
        f"/activites/{created['id']}",
        json={**FUTURE, "description": "Moved to next year"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == FUTURE["title"]
    assert body["description"] == "Moved to next year"
    assert body["status"] == "upcoming"


def test_missing_activity_is_404(client):
    assert client.get("/activites/7").status_code == 404
    assert client.put("/activites/7", json=PAST).status_code == 404
    assert client.delete("/activites/7").status_code == 404


def test_delete_activity(client, make_activity):
    created = make_activity(**PAST)

    response = client.delete(f"/activites/{created['id']}")

    assert response.status_code == 200
    assert client.get("/activites").json() == []
