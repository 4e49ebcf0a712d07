from datetime import date, datetime

from components.activity.schemas import Activity
from components.report.filters import ActivityStatus
from components.report.renderer import format_amount, render_chart_series, render_pdf
from components.report.schemas import DailyBucket, Summary, TimeframeBucket


def test_format_amount():
    assert format_amount(1250) == "1 250 Ar"
    assert format_amount(-1250.4) == "-1 250 Ar"
    assert format_amount(0) == "0 Ar"


def test_render_chart_series_aligns_columns():
    buckets = [
        TimeframeBucket(key="2024-03-01", label="1/3", revenue_sum=100.4, expense_sum=20.6, activity_count=0),
        TimeframeBucket(key="2024-03-02", label="2/3", revenue_sum=0, expense_sum=5, activity_count=2),
    ]

    series = render_chart_series(buckets)

    assert series.labels == ["1/3", "2/3"]
    assert series.revenue == [100, 0]
    assert series.expense == [21, 5]
    assert series.activities == [0, 2]


def test_render_pdf_with_all_sections():
    activity = Activity(
        id=1,
        title="Vaccination",
        start=datetime(2024, 3, 8, 8),
        end=datetime(2024, 3, 8, 12),
        status=ActivityStatus.finished,
    )
    daily = [DailyBucket(date=date(2024, 3, 2), revenue_total=100, expense_total=40, running_balance=60)]

    content = render_pdf("2024-03", Summary(revenue_total=100, expense_total=40, net_balance=60), daily, [activity])

    assert content.startswith(b"%PDF")
    assert len(content) > 1000


def test_render_pdf_empty_period():
    assert render_pdf("All time", Summary(), []).startswith(b"%PDF")
