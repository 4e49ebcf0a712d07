"""Presentation of already aggregated report data (PDF document, chart series)."""

from datetime import datetime
from io import BytesIO
from typing import Iterable, List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from components.activity.schemas import Activity
from components.report.schemas import ChartSeries, DailyBucket, Summary, TimeframeBucket

_TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
    ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
    ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
])


def format_amount(amount: float) -> str:
    """Format an amount in Ariary with space-separated thousands, e.g. "-1 250 Ar"."""
    return f"{amount:,.0f}".replace(",", " ") + " Ar"


def _format_datetime(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M")


def render_pdf(
    period_label: str,
    summary: Summary,
    daily: Iterable[DailyBucket],
    activities: Optional[Iterable[Activity]] = None,
) -> bytes:
    """Render the financial report for one period as PDF bytes."""
    buf = BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, title=f"Financial report - {period_label}")
    styles = getSampleStyleSheet()
    story = []

    story.append(Paragraph(f"Financial report - {period_label}", styles["Title"]))
    story.append(Spacer(1, 12))

    summary_rows = [
        ["Metric", "Value"],
        ["Total revenue", format_amount(summary.revenue_total)],
        ["Total expense", format_amount(summary.expense_total)],
        ["Net balance", format_amount(summary.net_balance)],
        ["Revenue transactions", str(summary.revenue_count)],
        ["Expense transactions", str(summary.expense_count)],
    ]
    summary_table = Table(summary_rows, hAlign="LEFT")
    summary_table.setStyle(_TABLE_STYLE)
    story.append(summary_table)
    story.append(Spacer(1, 12))

    daily = list(daily)
    if daily:
        story.append(Paragraph("Daily breakdown", styles["Heading2"]))
        rows = [["Date", "Revenue", "Expense", "Running balance"]] + [
            [
                bucket.date.isoformat(),
                format_amount(bucket.revenue_total),
                format_amount(bucket.expense_total),
                format_amount(bucket.running_balance),
            ]
            for bucket in daily
        ]
        table = Table(rows, hAlign="LEFT", repeatRows=1)
        table.setStyle(_TABLE_STYLE)
        story.append(table)
        story.append(Spacer(1, 12))

    activities = list(activities or [])
    if activities:
        story.append(Paragraph("Activities", styles["Heading2"]))
        rows = [["Title", "Start", "End", "Status"]] + [
            [activity.title, _format_datetime(activity.start), _format_datetime(activity.end), activity.status.value]
            for activity in activities
        ]
        table = Table(rows, hAlign="LEFT", repeatRows=1)
        table.setStyle(_TABLE_STYLE)
        story.append(table)

    doc.build(story)
    return buf.getvalue()


def render_chart_series(buckets: Iterable[TimeframeBucket]) -> ChartSeries:
    """Columnar series for the dashboard chart, amounts rounded for display."""
    buckets: List[TimeframeBucket] = list(buckets)
    return ChartSeries(
        labels=[bucket.label for bucket in buckets],
        revenue=[round(bucket.revenue_sum) for bucket in buckets],
        expense=[round(bucket.expense_sum) for bucket in buckets],
        activities=[bucket.activity_count for bucket in buckets],
    )
