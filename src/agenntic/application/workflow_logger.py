"""Leveled, structured logging for workflow runs."""

import logging
import traceback
import uuid
from collections.abc import Mapping
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any

from agenntic.domain.interfaces import WorkflowEventStoreInterface
from agenntic.domain.workflow_event import Severity, WorkflowEvent

_LOGGING_LEVELS = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class WorkflowLogger:
    """Emits workflow log events to a store.

    Every event is also forwarded to the standard library logger
    ``agenntic.workflow`` so applications can route it with their own
    logging configuration.
    """

    def __init__(
        self, event_store: WorkflowEventStoreInterface, workflow_id: str
    ) -> None:
        self._store = event_store
        self._workflow_id = workflow_id
        self._logger = logging.getLogger("agenntic.workflow")

    @property
    def event_store(self) -> WorkflowEventStoreInterface:
        return self._store

    def _emit(
        self, severity: Severity, message: str, payload: Mapping[str, Any] | None
    ) -> str:
        event = WorkflowEvent(
            event_id=str(uuid.uuid4()),
            workflow_id=self._workflow_id,
            severity=severity,
            message=message,
            payload=MappingProxyType(dict(payload or {})),
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        self._logger.log(
            _LOGGING_LEVELS[severity],
            "[%s] %s",
            self._workflow_id,
            message,
            extra={"workflow_payload": event.payload},
        )
        return self._store.store_event(event)

    def debug(self, message: str, payload: Mapping[str, Any] | None = None) -> str:
        return self._emit(Severity.DEBUG, message, payload)

    def info(self, message: str, payload: Mapping[str, Any] | None = None) -> str:
        return self._emit(Severity.INFO, message, payload)

    def warn(self, message: str, payload: Mapping[str, Any] | None = None) -> str:
        return self._emit(Severity.WARN, message, payload)

    def error(
        self,
        message: str,
        error: BaseException | None = None,
        payload: Mapping[str, Any] | None = None,
    ) -> str:
        """Emit an ERROR event, adding the error's name, message and stack."""
        data: dict[str, Any] = {}
        if error is not None:
            data["errorDetails"] = error_details(error)
        data.update(payload or {})
        return self._emit(Severity.ERROR, message, data)

    def get_logs(self) -> list[WorkflowEvent]:
        """Return the events stored for this workflow."""
        return self._store.get_events(self._workflow_id)

    def close(self) -> None:
        self._store.close()


def error_details(error: BaseException) -> dict[str, str]:
    """Describe an exception for a log payload."""
    return {
        "name": type(error).__name__,
        "message": str(error),
        "stack": "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        ),
    }
