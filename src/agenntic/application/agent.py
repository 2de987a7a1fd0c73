"""
Agent: persona-bearing executor bound to a language model.

Composes the final prompt for a task and delegates it to the model.
Retries are handled by Task; the agent runs a single attempt.
"""

import os
import uuid
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv

from agenntic.application.workflow_logger import WorkflowLogger, error_details
from agenntic.domain.exceptions import ConfigurationError
from agenntic.domain.interfaces import LargeLanguageModel
from agenntic.domain.models import AgentProfile, AgentState, ResolvedInputs
from agenntic.domain.prompts import PERSONALITY_TEMPLATE, TASK_CONTEXT_TEMPLATE
from agenntic.domain.templates import fill_template_string

if TYPE_CHECKING:
    from agenntic.application.task import Task

DEFAULT_MODEL_NAME = "gpt-4o"
API_KEY_ENV_VAR = "OPENAI_API_KEY"


class Agent:
    """
    Executes tasks with a fixed role, goal and background.

    The identity text may contain ``{name}`` placeholders; a Workflow
    resolves them per run without modifying the agent.
    """

    def __init__(
        self,
        role: str,
        goal: str,
        background: str = "",
        model: LargeLanguageModel | None = None,
    ):
        """
        Args:
            role: The role the agent plays, e.g. "Content writer"
            goal: What the agent should aim to achieve
            background: Additional details about the agent
            model: Language model to use (OpenAI gpt-4o if None)

        Raises:
            ConfigurationError: If no model is given and OPENAI_API_KEY is unset
        """
        self.id = f"ag-{uuid.uuid4()}"
        self.role = role
        self.goal = goal
        self.background = background
        self.state = AgentState.IDLE
        self.model = model if model is not None else self.get_default_model()

    @staticmethod
    def get_default_model() -> LargeLanguageModel:
        """Build the default OpenAI model from the environment (and .env)."""
        load_dotenv()
        api_key = os.environ.get(API_KEY_ENV_VAR)
        if not api_key:
            raise ConfigurationError(
                f"{API_KEY_ENV_VAR} environment variable is required to use "
                "the default model"
            )

        # Lazy import keeps the SDK optional for custom models
        from agenntic.infrastructure.llm.openai import OpenAIModel, OpenAIModelConfig

        return OpenAIModel(OpenAIModelConfig(model=DEFAULT_MODEL_NAME, api_key=api_key))

    @property
    def profile(self) -> AgentProfile:
        """Current literal identity text."""
        return AgentProfile(role=self.role, goal=self.goal, background=self.background)

    def resolved_profile(self, inputs: ResolvedInputs | None = None) -> AgentProfile:
        if inputs is None:
            return self.profile
        return inputs.for_agent(self.id, self.profile)

    async def execute_task(
        self,
        task: "Task",
        context: str,
        logger: WorkflowLogger,
        inputs: ResolvedInputs | None = None,
    ) -> str:
        """
        Run one attempt of a task against the model.

        Writes the reported token usage onto the task.

        Args:
            task: The task to execute
            context: Output of the task's dependencies (may be empty)
            logger: Workflow logger receiving progress events
            inputs: Resolved text for this run

        Returns:
            The model's response text

        Raises:
            Exception: Whatever the model raised, unchanged
        """
        try:
            self.state = AgentState.BUSY
            profile = self.resolved_profile(inputs)
            prompt = self.get_task_prompt(task, context, inputs)

            logger.debug(
                "Agent executing task",
                {
                    "agentDetails": {
                        "id": self.id,
                        "role": profile.role,
                        "background": profile.background,
                        "goal": profile.goal,
                        "model": {"name": self.model.name},
                    },
                    "taskDetails": {
                        "id": task.id,
                        "description": task.resolved_brief(inputs).description,
                        "dependencies": [t.id for t in task.dependency_tasks],
                        "expectedOutput": task.resolved_brief(inputs).expected_output,
                    },
                },
            )

            raw_response = await self.model.generate_response(prompt)
            response = self.model.format_response(raw_response)

            task.input_tokens = response.input_tokens
            task.output_tokens = response.output_tokens

            logger.info(
                "Task execution completed",
                {
                    "agentId": self.id,
                    "taskId": task.id,
                    "taskOutput": response.text,
                    "performance": {
                        "inputTokens": response.input_tokens,
                        "outputTokens": response.output_tokens,
                        "totalTokens": response.input_tokens + response.output_tokens,
                    },
                },
            )

            self.state = AgentState.IDLE
            return response.text
        except Exception as error:
            self.state = AgentState.ERROR
            logger.error(
                "Task execution failed",
                payload={
                    "agentId": self.id,
                    "taskId": task.id,
                    "errorDetails": error_details(error),
                },
            )
            raise

    def get_task_prompt(
        self, task: "Task", context: str = "", inputs: ResolvedInputs | None = None
    ) -> str:
        """Personality followed by the task prompt (with context if any)."""
        personality = self.get_agent_personality(inputs)
        if context:
            task_part = self.get_task_prompt_with_context(task, context, inputs)
        else:
            task_part = task.prompt(inputs)
        return f"{personality}\n{task_part}"

    def get_task_prompt_with_context(
        self, task: "Task", context: str, inputs: ResolvedInputs | None = None
    ) -> str:
        return fill_template_string(
            TASK_CONTEXT_TEMPLATE,
            {"taskPrompt": task.prompt(inputs), "context": context},
        )

    def get_agent_personality(self, inputs: ResolvedInputs | None = None) -> str:
        profile = self.resolved_profile(inputs)
        return fill_template_string(
            PERSONALITY_TEMPLATE,
            {
                "role": profile.role,
                "goal": profile.goal,
                "background": profile.background or "",
            },
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "role": self.role,
            "background": self.background,
            "goal": self.goal,
            "state": self.state.value,
            "modelName": self.model.name,
            "personality": self.get_agent_personality(),
        }
