"""Workflow log event models."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class Severity(str, Enum):
    """Log levels accepted by the workflow logger."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


@dataclass(frozen=True)
class WorkflowEvent:
    """Single structured log entry emitted during a workflow run."""

    event_id: str
    workflow_id: str
    severity: Severity
    message: str
    payload: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    created_at: str = ""  # ISO 8601
