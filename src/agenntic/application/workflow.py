"""
Workflow: runs tasks sequentially and aggregates telemetry.

Owns the per-run placeholder resolution and the workflow-level metrics.
"""

import asyncio
import time
import uuid
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from agenntic.application.agent import Agent
from agenntic.application.task import Task
from agenntic.application.workflow_logger import WorkflowLogger
from agenntic.domain.exceptions import MissingInputError, WorkflowIncompleteError
from agenntic.domain.interfaces import WorkflowEventStoreInterface
from agenntic.domain.models import (
    AgentProfile,
    ResolvedInputs,
    TaskBrief,
    WorkflowStatus,
)

InputValues = Mapping[str, str | int | float]


class Workflow:
    """
    Sequential driver over an ordered task list.

    The result of a run is the output of the last task in the list, so
    callers must list tasks in an order consistent with their dependencies.
    """

    def __init__(
        self,
        tasks: list[Task],
        agents: list[Agent],
        event_store: WorkflowEventStoreInterface | None = None,
    ):
        """
        Args:
            tasks: Tasks in execution order
            agents: Agents whose text is resolved at the start of a run
            event_store: Log sink (creates InMemory if None)
        """
        # Lazy import to avoid circular dependency
        if event_store is None:
            from agenntic.infrastructure.persistence import InMemoryWorkflowEventStore

            event_store = InMemoryWorkflowEventStore()

        self.id = f"wf-{uuid.uuid4()}"
        self.tasks = list(tasks)
        self.agents = list(agents)
        self.logger = WorkflowLogger(event_store, self.id)
        self.status = WorkflowStatus.NOT_STARTED
        self._reset_metrics()

    def _reset_metrics(self) -> None:
        self.input_tokens = 0
        self.output_tokens = 0
        self.start_time = 0.0
        self.end_time = 0.0
        self.total_time = 0.0

    def placeholders(self) -> tuple[str, ...]:
        """All placeholder names used by agents then tasks, first use first."""
        seen: dict[str, None] = {}
        for agent in self.agents:
            for name in agent.profile.placeholders():
                seen.setdefault(name, None)
        for task in self.tasks:
            for name in task.brief.placeholders():
                seen.setdefault(name, None)
        return tuple(seen)

    def resolve_inputs(
        self, values: InputValues, strict: bool = False
    ) -> ResolvedInputs:
        """
        Resolve placeholders of every agent, then every task.

        Agents and tasks are left untouched; the resolved text only lives
        in the returned view.

        Raises:
            MissingInputError: If strict and a placeholder has no value
        """
        missing = [name for name in self.placeholders() if name not in values]
        if missing:
            if strict:
                raise MissingInputError(missing)
            self.logger.warn("No input provided for placeholders", {"missing": missing})

        agents: dict[str, AgentProfile] = {}
        for agent in self.agents:
            profile = agent.profile.resolve(values)
            agents[agent.id] = profile
            self.logger.debug(
                "Agent updated:",
                {
                    "role": profile.role,
                    "background": profile.background,
                    "goal": profile.goal,
                },
            )

        tasks: dict[str, TaskBrief] = {}
        for task in self.tasks:
            brief = task.brief.resolve(values)
            tasks[task.id] = brief
            self.logger.debug(
                "Task updated:",
                {
                    "description": brief.description,
                    "expectedOutput": brief.expected_output,
                },
            )

        return ResolvedInputs(
            agents=MappingProxyType(agents), tasks=MappingProxyType(tasks)
        )

    async def initiate(
        self, input: InputValues | None = None, *, strict: bool = False
    ) -> str:
        """
        Run every task in order and return the last task's output.

        Args:
            input: Placeholder values; resolution is skipped when None
            strict: Reject runs with unresolved placeholders

        Returns:
            Output of the last task in the list

        Raises:
            TaskExecutionError: A task exhausted its attempts
            WorkflowIncompleteError: The task list is empty
            MissingInputError: strict is set and inputs are incomplete
        """
        self.logger.info("Workflow initiated.", {"workflowId": self.id})
        self._reset_metrics()

        try:
            inputs = None
            if input is not None:
                self.logger.debug("Input provided:", dict(input))
                inputs = self.resolve_inputs(input, strict=strict)
            elif strict and self.placeholders():
                raise MissingInputError(self.placeholders())
        except MissingInputError as error:
            self.status = WorkflowStatus.FAILED
            self.logger.error("Workflow input validation failed.", error)
            self.logger.close()
            raise

        self.status = WorkflowStatus.RUNNING
        self.start_time = time.perf_counter()
        last_index = len(self.tasks) - 1

        for index, task in enumerate(self.tasks):
            description = task.resolved_brief(inputs).description
            role = task.agent.resolved_profile(inputs).role
            self.logger.info(f"Agent {role} starting task: {description}")

            try:
                output = await task.execute(self.logger, inputs)
            except Exception as error:
                self.status = WorkflowStatus.FAILED
                self.logger.error(f"Error in task {description}: {error}", error)
                self.logger.close()
                raise

            self.input_tokens += task.input_tokens
            self.output_tokens += task.output_tokens

            self.logger.debug("Task completed", task.to_dict())
            self.logger.info(f"Task completed in {task.total_time * 1000:.3f} ms")

            if index == last_index:
                self.end_time = time.perf_counter()
                self.total_time = self.end_time - self.start_time
                self.status = WorkflowStatus.COMPLETED

                self.logger.info(
                    f"Workflow completed successfully in {self.total_time * 1000:.3f} ms.",
                    {
                        "inputTokens": self.input_tokens,
                        "outputTokens": self.output_tokens,
                    },
                )
                self.logger.close()
                return output

        self.status = WorkflowStatus.FAILED
        incomplete = WorkflowIncompleteError()
        self.logger.error("Workflow failed to complete.", incomplete)
        self.logger.close()
        raise incomplete

    def run(self, input: InputValues | None = None, *, strict: bool = False) -> str:
        """Blocking wrapper around initiate() for synchronous callers."""
        return asyncio.run(self.initiate(input, strict=strict))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status.value,
            "inputTokens": self.input_tokens,
            "outputTokens": self.output_tokens,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "totalTime": self.total_time,
            "tasks": [task.to_dict() for task in self.tasks],
        }
