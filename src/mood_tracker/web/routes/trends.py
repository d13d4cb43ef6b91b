"""Routes for trends and report export."""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...models.metrics import AggregatedDayMetric, TimeRange
from ...models.report import ExportReport
from ...services import MoodTracker
from ..deps import get_tracker

router = APIRouter()


@router.get("/trends", response_model=list[AggregatedDayMetric])
async def trends(
    time_range: TimeRange = Query(default=TimeRange.WEEK, alias="range"),
    tracker: MoodTracker = Depends(get_tracker),
):
    """Daily average ratings inside the lookback window, oldest first."""
    return tracker.aggregation.aggregate(time_range)


@router.get("/export", response_model=ExportReport)
async def export_report(
    start: Optional[date] = Query(default=None),
    end: Optional[date] = Query(default=None),
    tracker: MoodTracker = Depends(get_tracker),
):
    """Entries grouped by day for the printable report."""
    return tracker.export.build_report(start, end)
