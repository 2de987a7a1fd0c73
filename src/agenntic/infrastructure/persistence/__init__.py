"""
Workflow log persistence.
"""

from agenntic.infrastructure.persistence.workflow_events import (
    FilesystemWorkflowEventStore,
    InMemoryWorkflowEventStore,
)

__all__ = [
    "InMemoryWorkflowEventStore",
    "FilesystemWorkflowEventStore",
]
