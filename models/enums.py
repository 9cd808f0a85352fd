"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("WAITING", not "JobStatus.WAITING")
- They work as FastAPI path and query parameters
- Typos become immediate errors instead of silent bugs
"""

import enum


class EventKind(str, enum.Enum):
    ARRIVAL = "arrival"        # job becomes eligible for service
    START = "start"            # server picks the job up
    COMPLETION = "completion"  # server finishes the job


class JobStatus(str, enum.Enum):
    WAITING = "WAITING"        # arrived (or not yet arrived), not started
    PROCESSING = "PROCESSING"  # on the server
    COMPLETED = "COMPLETED"    # finished


class AppVariant(str, enum.Enum):
    RESTAURANT = "restaurant"  # menu + cart → kitchen orders
    RAILWAY = "railway"        # routes + cart → ticket bookings
