"""Time bucketing of mission submissions (core domain).

Bucket boundaries are anchored to the day of the month: a submission on day
``d`` belongs to the period starting ``d % bucket_days`` days earlier. This
keeps the legacy chart's buckets, which shift at month boundaries instead of
following a rolling window from the first submission.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, List, Tuple

from core.grouping import group_by
from core.models import Action, Bucket


def period_start(timestamp: datetime, bucket_days: int) -> date:
    """Return the start date of the bucket containing ``timestamp``."""

    day = timestamp.date()
    return day - timedelta(days=day.day % bucket_days)


def bucket_actions(actions: Iterable[Action], bucket_days: int) -> Tuple[Bucket, ...]:
    """Group actions into buckets ordered by period start."""

    groups = group_by(actions, key=lambda action: period_start(action.timestamp, bucket_days))
    buckets = [Bucket(period_start=start, members=members) for start, members in groups.items()]
    return tuple(sorted(buckets, key=lambda bucket: bucket.period_start))


def fill_gaps(buckets: Iterable[Bucket], bucket_days: int) -> Tuple[Bucket, ...]:
    """Insert empty buckets so the series has a point every ``bucket_days``.

    Steps run from the first to the last period start. A step gets an empty
    bucket only when no existing bucket starts on that date.
    """

    existing: List[Bucket] = list(buckets)
    if not existing:
        return ()
    starts = {bucket.period_start for bucket in existing}
    first = min(starts)
    last = max(starts)

    step = timedelta(days=bucket_days)
    cursor = first
    while cursor < last:
        if cursor not in starts:
            existing.append(Bucket(period_start=cursor))
        cursor += step
    return tuple(sorted(existing, key=lambda bucket: bucket.period_start))
