"""Workflow log store implementations."""

import json
import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from types import MappingProxyType
from typing import Any

from agenntic.domain.interfaces import WorkflowEventStoreInterface
from agenntic.domain.workflow_event import Severity, WorkflowEvent

logger = logging.getLogger(__name__)


class InMemoryWorkflowEventStore(WorkflowEventStoreInterface):
    """In-memory implementation for tests and short-lived runs."""

    def __init__(self) -> None:
        self._events: list[WorkflowEvent] = []

    def store_event(self, event: WorkflowEvent) -> str:
        self._events.append(event)
        return event.event_id

    def get_events(
        self,
        workflow_id: str,
        severity: Severity | None = None,
    ) -> list[WorkflowEvent]:
        return [
            e
            for e in self._events
            if e.workflow_id == workflow_id
            and (severity is None or e.severity == severity)
        ]


class FilesystemWorkflowEventStore(WorkflowEventStoreInterface):
    """Filesystem implementation writing one NDJSON line per event.

    Each line carries ``timestamp``, ``severity``, ``textPayload`` and
    ``jsonPayload`` alongside the event and workflow ids.
    """

    def __init__(
        self, log_folder: Path | str = "logs", log_file_name: str | None = None
    ) -> None:
        self.log_folder = Path(log_folder)
        self.log_folder.mkdir(parents=True, exist_ok=True)

        if log_file_name is None:
            # ':' and '.' are not portable in file names
            stamp = datetime.now(timezone.utc).isoformat()
            stamp = stamp.replace(":", "-").replace(".", "-")
            log_file_name = f"workflow-log-{stamp}.log"
        self.log_file_path = self.log_folder / log_file_name

    def store_event(self, event: WorkflowEvent) -> str:
        with open(self.log_file_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(self._event_to_dict(event), default=str) + "\n")
        return event.event_id

    def get_events(
        self,
        workflow_id: str,
        severity: Severity | None = None,
    ) -> list[WorkflowEvent]:
        if not self.log_file_path.exists():
            return []
        events: list[WorkflowEvent] = []
        with open(self.log_file_path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, 1):
                if not line.strip():
                    continue
                try:
                    event = self._dict_to_event(json.loads(line))
                except (json.JSONDecodeError, KeyError, ValueError) as e:
                    logger.warning(
                        "Skipping malformed log line %d in %s: %s",
                        line_number,
                        self.log_file_path,
                        e,
                    )
                    continue
                if event.workflow_id != workflow_id:
                    continue
                if severity and event.severity != severity:
                    continue
                events.append(event)
        return events

    def destroy(self) -> None:
        """Delete the log file."""
        self.log_file_path.unlink(missing_ok=True)

    def _event_to_dict(self, event: WorkflowEvent) -> dict[str, Any]:
        """Serialize event to dict."""
        return {
            "event_id": event.event_id,
            "workflow_id": event.workflow_id,
            "timestamp": event.created_at,
            "severity": event.severity.value,
            "textPayload": event.message,
            "jsonPayload": dict(event.payload),
        }

    def _dict_to_event(self, data: Mapping[str, Any]) -> WorkflowEvent:
        """Deserialize dict to event."""
        return WorkflowEvent(
            event_id=data["event_id"],
            workflow_id=data["workflow_id"],
            severity=Severity(data["severity"]),
            message=data.get("textPayload", ""),
            payload=MappingProxyType(dict(data.get("jsonPayload") or {})),
            created_at=data.get("timestamp", ""),
        )
