"""Structured logging for paginated fetches.

This module provides telemetry hooks for page planning and execution,
emitting structured logs for observability.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_plan(
    *,
    endpoint_id: str,
    total_pages: int,
    retrieved: int,
    count: int,
    limit: int,
) -> None:
    """Log remaining-page planning after the first response.

    Args:
        endpoint_id: Endpoint identifier (usually the URL)
        total_pages: Number of pages still to request
        retrieved: Items already retrieved by the first page
        count: Total count reported by the server
        limit: Page size reported by the server
    """
    logger.info(
        "page_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "total_pages": total_pages,
            "retrieved": retrieved,
            "count": count,
            "limit": limit,
        },
    )


def log_page_completed(
    *,
    endpoint_id: str,
    page_index: int,
    offset: int,
    rows: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page request."""
    logger.debug(
        "page_completed",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "offset": offset,
            "rows": rows,
            "latency_ms": latency_ms,
        },
    )


def log_fetch_complete(
    *,
    endpoint_id: str,
    strategy: str,
    pages_used: int,
    total_rows: int,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a whole fetch.

    Args:
        endpoint_id: Endpoint identifier
        strategy: "batch" or "incremental"
        pages_used: Number of pages requested
        total_rows: Number of primary resources retrieved
        total_latency_ms: Wall time of the fetch in milliseconds
    """
    logger.info(
        "fetch_complete",
        extra={
            "endpoint_id": endpoint_id,
            "strategy": strategy,
            "pages_used": pages_used,
            "total_rows": total_rows,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    page_index: int,
    offset: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page request."""
    logger.error(
        "page_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "offset": offset,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
