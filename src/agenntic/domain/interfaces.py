"""
Domain interfaces (Ports) for agenntic.

These abstract base classes define the contracts that adapters must satisfy.
They have no external dependencies and represent the core domain boundaries.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from agenntic.domain.models import ModelResponse
    from agenntic.domain.workflow_event import Severity, WorkflowEvent


class LargeLanguageModel(ABC):
    """
    Port for language model providers.

    Implementations wrap a provider SDK (or a stub) behind two operations:
    an awaitable call that produces the provider's raw response, and a
    formatter that normalises it into a ModelResponse.

    Note (Retries):
        generate_response() may be called several times for the same
        prompt when a task retries. It must not keep per-prompt state
        that would make a retry behave differently from a first call.
    """

    def __init__(self, name: str) -> None:
        """
        Args:
            name: Human-readable name of the implementation
        """
        self.name = name

    @abstractmethod
    async def generate_response(self, prompt: str) -> Any:
        """
        Send a prompt to the model.

        Args:
            prompt: Fully composed prompt text

        Returns:
            The provider's raw response object

        Raises:
            Exception: Any provider or network failure
        """

    @abstractmethod
    def format_response(self, raw_response: Any) -> "ModelResponse":
        """
        Normalise a raw response.

        Must not raise: missing content yields empty text and best-effort
        token counts.

        Args:
            raw_response: Value returned by generate_response()

        Returns:
            ModelResponse with text and token usage
        """


class WorkflowEventStoreInterface(ABC):
    """
    Port for workflow log persistence.

    Stores are append-only sinks of WorkflowEvent records.
    """

    @abstractmethod
    def store_event(self, event: "WorkflowEvent") -> str:
        """
        Append an event.

        Args:
            event: The event to store

        Returns:
            The event_id
        """

    @abstractmethod
    def get_events(
        self,
        workflow_id: str,
        severity: "Severity | None" = None,
    ) -> list["WorkflowEvent"]:
        """
        Read back events of one workflow in the order they were stored.

        Args:
            workflow_id: Workflow whose events to return
            severity: Only return events of this severity

        Returns:
            List of matching events
        """

    def close(self) -> None:
        """Release resources held by the store."""
        return None
