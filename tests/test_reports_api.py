import pytest


@pytest.fixture
def ledger(make_transaction, make_activity):
    make_transaction("revenu", 100, date="2024-03-02T09:00:00")
    make_transaction("depense", 40, date="2024-03-02T15:00:00")
    make_transaction("depense", -10, date="2024-03-05T10:00:00")
    make_transaction("revenu", 500, date="2024-04-01T10:00:00")
    make_transaction("revenu", 7, date="2023-03-20T10:00:00")
    make_activity("Vaccination", "2024-03-08T08:00:00", "2024-03-08T12:00:00")
    make_activity("Screening", "2999-04-01T08:00:00", "2999-04-01T12:00:00")


def test_health_check(client):
    response = client.get("/health_check/")

    assert response.status_code == 200
    assert response.json() == {"service_name": "Clinic Finance API", "status": "healthy"}
    assert response.headers["X-Request-ID"]


def test_summary_all_time(client, ledger):
    body = client.get("/reports/summary").json()

    assert body["revenue_total"] == 607
    assert body["expense_total"] == 50
    assert body["net_balance"] == 557
    assert body["revenue_count"] == 3
    assert body["expense_count"] == 2


def test_summary_for_month(client, ledger):
    body = client.get("/reports/summary", params={"year": 2024, "month": 3}).json()

    assert body["revenue_total"] == 100
    assert body["expense_total"] == 50
    assert body["net_balance"] == 50


def test_summary_same_month_all_years(client, ledger):
    body = client.get("/reports/summary", params={"year": "all", "month": "3"}).json()

    assert body["revenue_total"] == 107


def test_summary_empty_store(client):
    body = client.get("/reports/summary").json()

    assert body == {
        "revenue_total": 0,
        "expense_total": 0,
        "net_balance": 0,
        "revenue_count": 0,
        "expense_count": 0,
    }


@pytest.mark.parametrize("params", [{"month": 13}, {"month": "march"}, {"year": "last"}])
def test_bad_period_is_400(client, params):
    response = client.get("/reports/summary", params=params)

    assert response.status_code == 400


def test_daily_report(client, ledger):
    body = client.get("/reports/daily", params={"year": 2024, "month": 3}).json()

    assert [b["date"] for b in body] == ["2024-03-02", "2024-03-05", "2024-03-08"]
    assert [b["running_balance"] for b in body] == [60, 50, 50]
    assert body[2]["revenue_total"] == 0
    assert body[2]["expense_total"] == 0


def test_timeframe_report(client, ledger):
    body = client.get("/reports/timeframe", params={"timeframe": "yearly"}).json()

    assert body["timeframe"] == "yearly"
    assert [b["key"] for b in body["buckets"]] == ["2023-03", "2024-03", "2024-04", "2999-04"]
    assert body["chart"]["labels"] == ["Mar 2023", "Mar 2024", "Apr 2024", "Apr 2999"]
    assert body["chart"]["activities"] == [0, 1, 0, 1]
    assert body["metrics"]["total_revenue"] == 607
    assert body["metrics"]["total_activities"] == 2


def test_timeframe_weekly_default(client, ledger):
    body = client.get("/reports/timeframe").json()

    assert body["timeframe"] == "weekly"
    assert len(body["buckets"]) == 6
    assert body["buckets"][-1]["label"] == "1/4"


def test_timeframe_rejects_unknown_value(client):
    assert client.get("/reports/timeframe", params={"timeframe": "daily"}).status_code == 400


def test_activity_report_by_status(client, ledger):
    finished = client.get("/reports/activities", params={"status": "finished"}).json()
    upcoming = client.get("/reports/activities", params={"status": "upcoming", "year": 2999}).json()
    everything = client.get("/reports/activities").json()

    assert [a["title"] for a in finished["activities"]] == ["Vaccination"]
    assert finished["status"] == "finished"
    assert upcoming["period"] == "2999"
    assert [a["title"] for a in upcoming["activities"]] == ["Screening"]
    assert everything["period"] == "All time"
    assert everything["status"] is None
    assert len(everything["activities"]) == 2


def test_activity_report_rejects_unknown_status(client):
    assert client.get("/reports/activities", params={"status": "cancelled"}).status_code == 400


def test_export_pdf(client, ledger):
    response = client.get("/reports/export.pdf", params={"year": 2024, "month": 3})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert 'filename="report-2024-03.pdf"' in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")


def test_export_pdf_empty_store(client):
    response = client.get("/reports/export.pdf")

    assert response.status_code == 200
    assert response.content.startswith(b"%PDF")
