#!/usr/bin/env python3
"""Render a workflow log written by FilesystemWorkflowEventStore.

Usage:
    python scripts/log_report.py <log_file> --workflow-id <id> [--format table|timeline]

Example:
    python scripts/log_report.py logs/workflow-log-2024-01-01T00-00-00.log \
        --workflow-id wf-1234 --format timeline
"""

import argparse
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from agenntic.domain.workflow_event import Severity, WorkflowEvent
from agenntic.infrastructure.persistence.workflow_events import (
    FilesystemWorkflowEventStore,
)

console = Console()

SEVERITY_STYLES = {
    Severity.DEBUG: "dim",
    Severity.INFO: "green",
    Severity.WARN: "yellow",
    Severity.ERROR: "bold red",
}


def format_table(events: list[WorkflowEvent]) -> None:
    """Format events as a table."""
    table = Table()
    table.add_column("#", justify="right")
    table.add_column("Time")
    table.add_column("Severity")
    table.add_column("Task")
    table.add_column("Message")

    for i, event in enumerate(events, 1):
        timestamp = event.created_at[:19] if event.created_at else "?"
        table.add_row(
            str(i),
            timestamp,
            Text(event.severity.value, style=SEVERITY_STYLES[event.severity]),
            str(event.payload.get("taskId", "-")),
            Text(event.message[:80]),
        )

    console.print(table)


def format_timeline(events: list[WorkflowEvent]) -> None:
    """Format events as a timeline."""
    for event in events:
        timestamp = event.created_at[:19] if event.created_at else "?"
        symbol = {
            Severity.DEBUG: "[.]",
            Severity.INFO: "[+]",
            Severity.WARN: "[!]",
            Severity.ERROR: "[-]",
        }[event.severity]

        line = Text(f"{timestamp} {symbol} ", style=SEVERITY_STYLES[event.severity])
        line.append(event.message)
        console.print(line)

        # Show failure and retry details
        details = event.payload.get("errorDetails")
        if details:
            console.print(
                f"              {details.get('name')}: {details.get('message')}",
                style="red",
                markup=False,
            )
        retry = event.payload.get("retry")
        if retry:
            console.print(
                f"              next attempt: "
                f"{retry.get('nextAttempt')}/{retry.get('maxAttempts')}",
                style="yellow",
            )


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate workflow log report")
    parser.add_argument("log_file", type=Path, help="Path to the NDJSON log file")
    parser.add_argument("--workflow-id", required=True, help="Workflow ID to report")
    parser.add_argument(
        "--format",
        choices=["table", "timeline"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--severity",
        choices=[s.value for s in Severity],
        help="Only show events of this severity",
    )
    args = parser.parse_args()

    store = FilesystemWorkflowEventStore(args.log_file.parent, args.log_file.name)
    severity = Severity(args.severity) if args.severity else None
    events = store.get_events(args.workflow_id, severity)

    if not events:
        console.print(f"No events found for workflow {args.workflow_id}")
        return

    console.print(
        Panel(
            Text(f"Workflow: {args.workflow_id}\nEvents: {len(events)}", style="bold blue"),
            expand=False,
        )
    )

    if args.format == "table":
        format_table(events)
    else:
        format_timeline(events)

    # Summary statistics
    summary = Table(title="Summary", show_header=False, box=None)
    summary.add_column("Key", style="cyan")
    summary.add_column("Value")
    summary.add_row("Total events", str(len(events)))
    for level in Severity:
        summary.add_row(level.value, str(sum(1 for e in events if e.severity is level)))
    summary.add_row(
        "Retries", str(sum(1 for e in events if e.message == "Retrying failed task"))
    )
    console.print()
    console.print(summary)


if __name__ == "__main__":
    main()
