"""Tests for summarize() and its rounding."""

from models.job import SchedulingResult
from scheduler.fcfs import schedule
from scheduler.statistics import round2, summarize


def test_empty_results_give_no_statistics():
    """No data is None, not zero-valued averages."""
    assert summarize([]) is None
    assert summarize(()) is None


def test_convoy_scenario(make_job):
    results = schedule([make_job(0, 10), make_job(0, 3), make_job(5, 2)]).results
    stats = summarize(results)

    assert stats.avg_wait_time == 6.0
    assert stats.avg_turnaround_time == 11.0
    assert stats.min_wait_time == 0
    assert stats.max_wait_time == 10
    assert stats.min_turnaround_time == 10
    assert stats.max_turnaround_time == 13
    assert stats.job_count == 3
    assert stats.total_time == 15


def test_single_job(make_job):
    stats = summarize(schedule([make_job(0, 5)]).results)
    assert stats.avg_wait_time == 0.0
    assert stats.avg_turnaround_time == 5.0
    assert stats.total_time == 5


def test_total_time_is_latest_completion_not_sum(make_job):
    stats = summarize(schedule([make_job(0, 2), make_job(20, 3)]).results)
    assert stats.total_time == 23


def test_averages_round_to_two_places(make_job):
    # waits 0, 0, 1 → 0.333...
    results = schedule([make_job(0, 1), make_job(1, 1), make_job(1, 1)]).results
    stats = summarize(results)
    assert stats.avg_wait_time == 0.33


def test_rounding_is_half_up(make_job):
    """1 / 8 = 0.125 → 0.13 (round() would give 0.12)."""
    jobs = [make_job(0, 0) for _ in range(8)]
    results = [SchedulingResult(job=j, start_time=0, completion_time=0) for j in jobs[:7]]
    results.append(SchedulingResult(job=jobs[7], start_time=1, completion_time=1))

    assert summarize(results).avg_wait_time == 0.13


def test_round2():
    assert round2(2.675) == 2.68
    assert round2(6.0) == 6.0
    assert round2(1 / 3) == 0.33


def test_summarize_is_idempotent(make_job):
    results = schedule([make_job(0, 4), make_job(2, 1)]).results
    assert summarize(results) == summarize(results)
