"""Print overdue and at-risk work requests from a JSON export.

Usage:
    python scripts/sla_report.py requests.json --threshold 0.2
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from lostfound.models.work_request import WorkRequest, parse_work_request
from lostfound.routing.sla import DEFAULT_BREACH_THRESHOLD, SlaMonitor


def load_requests(path: Path) -> list[WorkRequest]:
    """Load a JSON array of work requests, one concrete variant per entry."""
    raw = json.loads(path.read_text(encoding="utf-8"))
    return [parse_work_request(item) for item in raw]


def format_line(request: WorkRequest) -> str:
    return (
        f"  {request.request_id or '-':<12} {request.request_type.value:<32} "
        f"{request.priority.value:<7} {request.hours_until_sla():>5}h left"
    )


def build_report(requests: list[WorkRequest], threshold: float) -> list[str]:
    monitor = SlaMonitor(threshold=threshold)
    overdue = monitor.overdue_requests(requests)
    at_risk = monitor.approaching_breach(requests)

    lines = [f"Overdue ({len(overdue)}):"]
    lines.extend(format_line(r) for r in overdue)
    lines.append(f"Approaching breach ({len(at_risk)}):")
    lines.extend(format_line(r) for r in at_risk)
    return lines


def main() -> None:
    parser = argparse.ArgumentParser(description="SLA report for lost-and-found work requests")
    parser.add_argument("path", type=Path, help="JSON file holding an array of work requests")
    parser.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_BREACH_THRESHOLD,
        help="Remaining-time fraction below which a request counts as at risk",
    )
    args = parser.parse_args()

    for line in build_report(load_requests(args.path), args.threshold):
        print(line)


if __name__ == "__main__":
    main()
