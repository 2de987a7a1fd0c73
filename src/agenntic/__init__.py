"""
agenntic: sequential LLM agent workflows.

Run an ordered list of tasks, each executed by a persona-bearing agent,
feeding the outputs of dependency tasks into later prompts as context.

Example:
    from agenntic import Agent, Task, Workflow

    writer = Agent(
        role="Content Writer",
        goal="Write an article about {topic}",
        background="You are an expert in writing engaging content.",
    )
    draft = Task(
        description="Draft an article on the topic of {topic}",
        agent=writer,
        expected_output="An informative article about {topic}.",
    )

    workflow = Workflow(tasks=[draft], agents=[writer])
    article = workflow.run({"topic": "Quantum Computing"})
"""

# Application layer (orchestration)
from agenntic.application.agent import Agent
from agenntic.application.task import Task
from agenntic.application.workflow import Workflow
from agenntic.application.workflow_logger import WorkflowLogger

# Domain exceptions
from agenntic.domain.exceptions import (
    ConfigurationError,
    MissingInputError,
    TaskExecutionError,
    WorkflowIncompleteError,
)

# Domain interfaces (for type hints and custom implementations)
from agenntic.domain.interfaces import (
    LargeLanguageModel,
    WorkflowEventStoreInterface,
)
from agenntic.domain.models import (
    AgentState,
    ModelResponse,
    WorkflowStatus,
)
from agenntic.domain.prompts import json_output
from agenntic.domain.templates import fill_template_string
from agenntic.domain.workflow_event import Severity, WorkflowEvent

# Infrastructure (explicit import encouraged for dependency injection)
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

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Application layer
    "Agent",
    "Task",
    "Workflow",
    "WorkflowLogger",
    # Domain models
    "AgentState",
    "ModelResponse",
    "WorkflowStatus",
    "Severity",
    "WorkflowEvent",
    # Helpers
    "fill_template_string",
    "json_output",
    # Domain interfaces
    "LargeLanguageModel",
    "WorkflowEventStoreInterface",
    # Domain exceptions
    "ConfigurationError",
    "MissingInputError",
    "TaskExecutionError",
    "WorkflowIncompleteError",
    # Infrastructure - LLM
    "HuggingFaceModel",
    "MockModel",
    "OllamaModel",
    "OpenAIModel",
    # Infrastructure - Persistence
    "InMemoryWorkflowEventStore",
    "FilesystemWorkflowEventStore",
]
