from __future__ import annotations
import logging
from typing import Iterable, List
from meeting_finder.models import TimeRange, ORDER_BY_START, START_OF_DAY, END_OF_DAY, DAY_MINUTES

logger = logging.getLogger(__name__)


def merge_busy(busy: Iterable[TimeRange]) -> List[TimeRange]:
    """
    Merge busy ranges into sorted, disjoint blocks.

    Ranges that overlap or touch end to end collapse into one block whose end
    is the running maximum of the cluster, so a long range swallows any number
    of shorter ranges sorted after it. Empty ranges cover nothing and are
    dropped.

    Example:
        [0,600) [100,200) [600,700) [800,900)  ->  [0,700) [800,900)
    """
    merged: List[TimeRange] = []
    for r in sorted(busy, key=ORDER_BY_START):
        if r.duration == 0:
            continue
        if merged and r.start <= merged[-1].end:
            if r.end > merged[-1].end:
                merged[-1] = TimeRange(start=merged[-1].start, end=r.end)
        else:
            merged.append(r)
    return merged


def find_free(busy: Iterable[TimeRange], min_duration: int) -> List[TimeRange]:
    """
    Compute the free windows of the day that are at least ``min_duration`` long.

    The result is the whole day minus the union of ``busy``, sorted by start.
    Windows never overlap or touch and are never empty. The last window runs
    through the end of the day.
    """
    if min_duration < 0:
        raise ValueError(f"min_duration must be non-negative, got {min_duration}")
    if min_duration > DAY_MINUTES:
        return []

    free: List[TimeRange] = []
    cursor = START_OF_DAY
    for block in merge_busy(busy):
        gap = block.start - cursor
        if gap > 0 and gap >= min_duration:
            free.append(TimeRange.from_start_end(cursor, block.start))
        cursor = block.end

    if cursor <= END_OF_DAY:
        tail = TimeRange.from_start_end(cursor, END_OF_DAY, inclusive=True)
        if tail.duration >= min_duration:
            free.append(tail)

    logger.debug("find_free: %d window(s) of >= %d min", len(free), min_duration)
    return free
