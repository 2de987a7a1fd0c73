"""
Domain layer for agenntic.

Contains models, ports and prompt text with no external dependencies.
"""

from agenntic.domain.exceptions import (
    ConfigurationError,
    MissingInputError,
    TaskExecutionError,
    WorkflowIncompleteError,
)
from agenntic.domain.interfaces import (
    LargeLanguageModel,
    WorkflowEventStoreInterface,
)
from agenntic.domain.models import (
    AgentProfile,
    AgentState,
    ModelResponse,
    ResolvedInputs,
    TaskBrief,
    WorkflowStatus,
)
from agenntic.domain.prompts import json_output
from agenntic.domain.templates import extract_placeholders, fill_template_string
from agenntic.domain.workflow_event import Severity, WorkflowEvent

__all__ = [
    # Models
    "AgentProfile",
    "AgentState",
    "ModelResponse",
    "ResolvedInputs",
    "TaskBrief",
    "WorkflowStatus",
    # Events
    "Severity",
    "WorkflowEvent",
    # Templates and prompts
    "extract_placeholders",
    "fill_template_string",
    "json_output",
    # Interfaces
    "LargeLanguageModel",
    "WorkflowEventStoreInterface",
    # Exceptions
    "ConfigurationError",
    "MissingInputError",
    "TaskExecutionError",
    "WorkflowIncompleteError",
]
