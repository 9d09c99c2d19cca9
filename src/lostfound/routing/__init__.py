"""Work-request routing: candidate lookup, approver selection, priority and SLA."""

from __future__ import annotations

from lostfound.routing.engine import RoutingEngine
from lostfound.routing.recommendation import RoutingRecommendation

__all__ = ["RoutingEngine", "RoutingRecommendation"]
