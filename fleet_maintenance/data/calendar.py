"""
Month grid for the maintenance calendar.

Jobs land on the day whose ISO date string equals their ``scheduledDate``.
Weeks start on Sunday; the first row is padded with blank cells so the 1st
sits under its weekday.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from fleet_maintenance.data.models import Job

WEEKDAY_LABELS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
DAYS_PER_WEEK = 7


@dataclass
class CalendarDay:
    day: date
    jobs: List[Job] = field(default_factory=list)
    is_today: bool = False

    @property
    def job_count(self) -> int:
        return len(self.jobs)


@dataclass
class CalendarMonth:
    year: int
    month: int
    leading_blanks: int
    days: List[CalendarDay]

    @property
    def label(self) -> str:
        return month_label(self.year, self.month)

    def day(self, day_of_month: int) -> CalendarDay:
        return self.days[day_of_month - 1]

    def weeks(self) -> List[List[Optional[CalendarDay]]]:
        cells: List[Optional[CalendarDay]] = [None] * self.leading_blanks
        cells.extend(self.days)
        trailing = -len(cells) % DAYS_PER_WEEK
        cells.extend([None] * trailing)
        return [cells[i: i + DAYS_PER_WEEK] for i in range(0, len(cells), DAYS_PER_WEEK)]


def month_label(year: int, month: int) -> str:
    return date(year, month, 1).strftime("%B %Y")


def shift_month(today: date, offset: int) -> Tuple[int, int]:
    """(year, month) that is ``offset`` months away from ``today``'s month."""
    index = today.year * 12 + (today.month - 1) + offset
    year, month_index = divmod(index, 12)
    return year, month_index + 1


def sunday_first_weekday(day: date) -> int:
    # date.weekday() counts from Monday
    return (day.weekday() + 1) % DAYS_PER_WEEK


def jobs_on(jobs: Sequence[Job], day: date) -> List[Job]:
    key = day.isoformat()
    return [job for job in jobs if job.scheduled_date == key]


def _bucket_by_date(jobs: Sequence[Job]) -> Dict[str, List[Job]]:
    buckets: Dict[str, List[Job]] = defaultdict(list)
    for job in jobs:
        buckets[job.scheduled_date].append(job)
    return buckets


def build_month(
    jobs: Sequence[Job],
    year: int,
    month: int,
    today: Optional[date] = None,
) -> CalendarMonth:
    today = today or date.today()
    period = pd.Period(year=year, month=month, freq="M")
    month_days = pd.date_range(period.start_time, periods=period.days_in_month, freq="D")
    buckets = _bucket_by_date(jobs)

    days = []
    for ts in month_days:
        day = ts.date()
        days.append(
            CalendarDay(
                day=day,
                jobs=list(buckets.get(day.isoformat(), [])),
                is_today=day == today,
            )
        )

    return CalendarMonth(
        year=year,
        month=month,
        leading_blanks=sunday_first_weekday(days[0].day),
        days=days,
    )
