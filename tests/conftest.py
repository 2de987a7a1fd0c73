"""Shared pytest fixtures for agenntic tests."""

import pytest

from agenntic.application.agent import Agent
from agenntic.application.workflow_logger import WorkflowLogger
from agenntic.infrastructure.llm.mock import MockModel
from agenntic.infrastructure.persistence.workflow_events import (
    InMemoryWorkflowEventStore,
)


@pytest.fixture
def event_store() -> InMemoryWorkflowEventStore:
    """Create an in-memory workflow event store."""
    return InMemoryWorkflowEventStore()


@pytest.fixture
def workflow_logger(event_store: InMemoryWorkflowEventStore) -> WorkflowLogger:
    """Create a logger writing to the in-memory store."""
    return WorkflowLogger(event_store, "wf-test")


@pytest.fixture
def mock_model() -> MockModel:
    """Create a mock model with sample responses."""
    return MockModel(
        responses=["First draft", "Second draft", "Third draft"],
        input_tokens=12,
        output_tokens=34,
    )


@pytest.fixture
def writer(mock_model: MockModel) -> Agent:
    """Create an agent backed by the mock model."""
    return Agent(
        role="Content Writer",
        goal="Write an article about {topic}",
        background="You are an expert in writing engaging content",
        model=mock_model,
    )
