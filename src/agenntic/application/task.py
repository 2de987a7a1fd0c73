"""
Task: a single workflow step with bounded retries.

Assembles context from dependency outputs and runs its agent until an
attempt succeeds or the attempt budget is exhausted.
"""

import time
import uuid
from typing import Any

from agenntic.application.agent import Agent
from agenntic.application.workflow_logger import WorkflowLogger, error_details
from agenntic.domain.exceptions import TaskExecutionError
from agenntic.domain.models import ResolvedInputs, TaskBrief
from agenntic.domain.prompts import EXPECTED_OUTPUT_TEMPLATE
from agenntic.domain.templates import fill_template_string

DEFAULT_MAX_ATTEMPTS = 3


class Task:
    """
    A unit of work assigned to one agent.

    Transient fields (context, output, token counts, timings, retry_count)
    are written by execute() and stay readable afterwards. ``output`` is
    only set by a successful attempt.
    """

    def __init__(
        self,
        description: str,
        agent: Agent,
        expected_output: str,
        dependency_tasks: list["Task"] | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        """
        Args:
            description: What the task entails
            agent: The agent responsible for the task
            expected_output: What the task's completion looks like
            dependency_tasks: Tasks whose outputs form this task's context
            max_attempts: Attempts before the task fails (default: 3)
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

        self.id = f"tsk-{uuid.uuid4()}"
        self.description = description
        self.agent = agent
        self.expected_output = expected_output
        self.dependency_tasks: list[Task] = list(dependency_tasks or [])
        self.max_attempts = max_attempts

        self.context = ""
        self.output: str | None = None
        self.input_tokens = 0
        self.output_tokens = 0
        self.start_time = 0.0
        self.end_time = 0.0
        self.total_time = 0.0
        self.retry_count = 0

    @property
    def brief(self) -> TaskBrief:
        """Current literal description and expected output."""
        return TaskBrief(
            description=self.description, expected_output=self.expected_output
        )

    def resolved_brief(self, inputs: ResolvedInputs | None = None) -> TaskBrief:
        if inputs is None:
            return self.brief
        return inputs.for_task(self.id, self.brief)

    def collect_context(self) -> str:
        """Newline-joined outputs of dependencies that have produced one."""
        return "\n".join(t.output for t in self.dependency_tasks if t.output)

    async def execute(
        self, logger: WorkflowLogger, inputs: ResolvedInputs | None = None
    ) -> str:
        """
        Execute the task with retry logic.

        Attempts run back to back with no delay.

        Args:
            logger: Workflow logger receiving progress events
            inputs: Resolved text for this run

        Returns:
            The output of the first successful attempt

        Raises:
            TaskExecutionError: If every attempt fails
        """
        self.output = None
        if self.dependency_tasks:
            self.context = self.collect_context()

        description = self.resolved_brief(inputs).description

        for attempt in range(self.max_attempts):
            self.retry_count = attempt

            logger.info(
                "Task execution attempt",
                {
                    "taskId": self.id,
                    "execution": {
                        "attempt": attempt + 1,
                        "maxAttempts": self.max_attempts,
                        "description": description,
                        "agentId": self.agent.id,
                        "agentRole": self.agent.resolved_profile(inputs).role,
                    },
                },
            )

            try:
                start_time = time.perf_counter()
                result = await self.agent.execute_task(
                    self, self.context, logger, inputs
                )
                end_time = time.perf_counter()
            except Exception as error:
                remaining = self.max_attempts - (attempt + 1)
                logger.error(
                    "Task execution failed",
                    payload={
                        "taskId": self.id,
                        "execution": {
                            "attempt": attempt + 1,
                            "maxAttempts": self.max_attempts,
                            "remainingAttempts": remaining,
                        },
                        "errorDetails": error_details(error),
                    },
                )
                if remaining == 0:
                    raise TaskExecutionError(self.id, self.max_attempts, error) from error

                logger.warn(
                    "Retrying failed task",
                    {
                        "taskId": self.id,
                        "retry": {
                            "attempt": attempt + 1,
                            "nextAttempt": attempt + 2,
                            "maxAttempts": self.max_attempts,
                        },
                    },
                )
                continue

            self.start_time = start_time
            self.end_time = end_time
            self.total_time = end_time - start_time
            self.output = result

            logger.info(
                "Task completed successfully",
                {
                    "taskId": self.id,
                    "performance": {
                        "durationMs": self.total_time * 1000,
                        "attemptsUsed": attempt + 1,
                        "inputTokens": self.input_tokens,
                        "outputTokens": self.output_tokens,
                    },
                    "result": {"output": result},
                },
            )
            return result

        # Unreachable: the final failed attempt raises above
        raise RuntimeError("Unexpected error in Task.execute")

    def prompt(self, inputs: ResolvedInputs | None = None) -> str:
        """Description followed by the expected-output guidelines."""
        brief = self.resolved_brief(inputs)
        expected = fill_template_string(
            EXPECTED_OUTPUT_TEMPLATE, {"expectedOutput": brief.expected_output}
        )
        return f"{brief.description}\n{expected}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "agentId": self.agent.id,
            "context": self.context,
            "description": self.description,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "totalTime": self.total_time,
            "inputTokens": self.input_tokens,
            "outputTokens": self.output_tokens,
            "retryCount": self.retry_count,
            "output": self.output,
            "prompt": self.prompt(),
        }
