"""Routing observers — where selection outcomes become log lines."""

from __future__ import annotations

import structlog

from lostfound.models.events import SelectionEvent

logger = structlog.get_logger(__name__)


class LoggingRoutingObserver:
    """Default IRoutingObserver: one structured log line per selection."""

    def on_selection(self, event: SelectionEvent) -> None:
        logger.info(
            "approver_selected",
            approver_id=event.approver_id,
            approver_name=event.approver_name,
            priority=event.priority.value,
            strategy=event.strategy.value,
            candidates=event.candidate_count,
            workload=event.workload_after,
        )


class NullRoutingObserver:
    """Discards every event."""

    def on_selection(self, event: SelectionEvent) -> None:
        return None
