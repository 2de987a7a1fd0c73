"""
Application layer for agenntic.

Contains the agents, tasks and workflows that coordinate domain objects.
"""

from agenntic.application.agent import Agent
from agenntic.application.task import Task
from agenntic.application.workflow import Workflow
from agenntic.application.workflow_logger import WorkflowLogger

__all__ = [
    "Agent",
    "Task",
    "Workflow",
    "WorkflowLogger",
]
