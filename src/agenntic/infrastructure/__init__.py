"""
Infrastructure layer for agenntic.

Contains adapters for external concerns (model providers, log stores).
"""

from agenntic.infrastructure.llm import (
    HuggingFaceModel,
    MockModel,
    OllamaModel,
    OpenAIModel,
)
from agenntic.infrastructure.persistence import (
    FilesystemWorkflowEventStore,
    InMemoryWorkflowEventStore,
)

__all__ = [
    # Persistence
    "InMemoryWorkflowEventStore",
    "FilesystemWorkflowEventStore",
    # LLM
    "HuggingFaceModel",
    "MockModel",
    "OllamaModel",
    "OpenAIModel",
]
