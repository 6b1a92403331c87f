"""Paginated fetch orchestration.

This module drives repeated requests against a paginated collection endpoint.

Architecture:
    The paging layer consists of:
    - planners.py: Remaining-page planning from the first response
    - executors.py: Batch strategy (remaining pages requested concurrently)
    - incremental.py: Incremental strategy (one page at a time, each page
      delivered before the next is requested)
    - telemetry.py: Structured logging

    Both strategies share one state machine (FetchState) and, given the same
    server pages, produce the same aggregated data in the same order.
"""

from __future__ import annotations

from .executors import BatchPageExecutor, FetchPage, PageResult
from .incremental import IncrementalFetch, StepCallback
from .planners import PagePlanner

__all__ = [
    "BatchPageExecutor",
    "FetchPage",
    "IncrementalFetch",
    "PagePlanner",
    "PageResult",
    "StepCallback",
]
