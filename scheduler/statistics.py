"""
Aggregate statistics over a schedule.

AWT (average wait time) and ATT (average turnaround time) are the two numbers
an FCFS demo is about; min/max show how uneven the waits are (convoy effect).

No results → None, not a Statistics full of zeros. An average of nothing is
not 0 and the UI should say "no data".
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence

from models.job import SchedulingResult, Statistics

_TWO_PLACES = Decimal("0.01")


def round2(value: float) -> float:
    """
    Round half away from zero to 2 decimals (round() would round half to even).

    Rounds the float's shortest decimal repr, not its binary value, so 2.675
    gives 2.68. JavaScript's toFixed(2) sees 2.67499999... and gives 2.67.
    Averages of integer times are k/n, so only such repr-level halves differ.
    """
    return float(Decimal(str(value)).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))


def summarize(results: Sequence[SchedulingResult]) -> Optional[Statistics]:
    if not results:
        return None

    count = len(results)
    waits = [r.wait_time for r in results]
    turnarounds = [r.turnaround_time for r in results]

    return Statistics(
        avg_wait_time=round2(sum(waits) / count),
        avg_turnaround_time=round2(sum(turnarounds) / count),
        min_wait_time=min(waits),
        max_wait_time=max(waits),
        min_turnaround_time=min(turnarounds),
        max_turnaround_time=max(turnarounds),
        job_count=count,
        total_time=max(r.completion_time for r in results),
    )
