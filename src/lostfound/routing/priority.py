"""PriorityClassifier — advisory urgency for a work request.

Each request variant computes its own ``priority_hint``:

    claim, high-value and value > 1000   URGENT
    claim, high-value                    HIGH
    evidence, stolen check               URGENT
    evidence                             HIGH
    transfer, found in a secure area     HIGH
    anything else                        NORMAL
"""

from __future__ import annotations

from typing import Any

from lostfound.models.work_request import RequestPriority


class PriorityClassifier:
    """Reads a request's priority hint without touching its stored priority."""

    def classify(self, request: Any) -> RequestPriority:
        hint = getattr(request, "priority_hint", None)
        if not callable(hint):
            return RequestPriority.NORMAL
        try:
            return RequestPriority(hint())
        except (TypeError, ValueError):
            return RequestPriority.NORMAL
