"""
Domain models for agenntic.

Pure data structures shared by agents, tasks and workflows. Everything
resolved for a run is immutable (frozen dataclasses) so a run never
writes placeholder values back into the caller's Agent or Task objects.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from agenntic.domain.templates import extract_placeholders, fill_template_string

# =============================================================================
# AGENT STATE
# =============================================================================


class AgentState(str, Enum):
    """Last known execution status of an agent (informational only)."""

    IDLE = "idle"
    BUSY = "busy"
    ERROR = "error"


# =============================================================================
# MODEL RESPONSE
# =============================================================================


@dataclass(frozen=True)
class ModelResponse:
    """Normalised model output."""

    text: str
    input_tokens: int = 0
    output_tokens: int = 0


# =============================================================================
# RESOLVED TEXT
# =============================================================================


@dataclass(frozen=True)
class AgentProfile:
    """Identity text of an agent."""

    role: str
    goal: str
    background: str = ""

    def placeholders(self) -> tuple[str, ...]:
        return extract_placeholders(f"{self.role}\n{self.goal}\n{self.background}")

    def resolve(self, values: Mapping[str, str | int | float]) -> "AgentProfile":
        return AgentProfile(
            role=fill_template_string(self.role, values),
            goal=fill_template_string(self.goal, values),
            background=fill_template_string(self.background, values),
        )


@dataclass(frozen=True)
class TaskBrief:
    """Description and expected output of a task."""

    description: str
    expected_output: str

    def placeholders(self) -> tuple[str, ...]:
        return extract_placeholders(f"{self.description}\n{self.expected_output}")

    def resolve(self, values: Mapping[str, str | int | float]) -> "TaskBrief":
        return TaskBrief(
            description=fill_template_string(self.description, values),
            expected_output=fill_template_string(self.expected_output, values),
        )


@dataclass(frozen=True)
class ResolvedInputs:
    """Per-run view of agent and task text after placeholder resolution.

    Keys are agent and task ids. Objects without an entry use their own
    literal text.
    """

    agents: Mapping[str, AgentProfile] = field(
        default_factory=lambda: MappingProxyType({})
    )
    tasks: Mapping[str, TaskBrief] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def for_agent(self, agent_id: str, fallback: AgentProfile) -> AgentProfile:
        return self.agents.get(agent_id, fallback)

    def for_task(self, task_id: str, fallback: TaskBrief) -> TaskBrief:
        return self.tasks.get(task_id, fallback)


# =============================================================================
# WORKFLOW STATUS
# =============================================================================


class WorkflowStatus(str, Enum):
    """Lifecycle of a workflow run."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"
