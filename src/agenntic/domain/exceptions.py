"""
Domain exceptions for agenntic.

These represent the failure modes of a workflow run.
"""

from collections.abc import Iterable


class ConfigurationError(ValueError):
    """
    Raised when a model client cannot be configured.

    Typically a provider credential missing from the environment. This is
    surfaced when the Agent (or model) is constructed and is never retried.
    """


class TaskExecutionError(Exception):
    """
    Raised when a task exhausts its attempts.

    The last underlying failure is kept in ``cause`` and chained as
    ``__cause__``; its message is embedded in this error's message.
    """

    def __init__(self, task_id: str, attempts: int, cause: BaseException):
        """
        Args:
            task_id: The task that failed
            attempts: Number of attempts made
            cause: The failure raised by the final attempt
        """
        super().__init__(f"Task failed after {attempts} attempts: {cause}")
        self.task_id = task_id
        self.attempts = attempts
        self.cause = cause


class WorkflowIncompleteError(Exception):
    """
    Raised when a workflow run ends without executing a final task.

    Distinguishes "nothing to run" from "something failed".
    """

    def __init__(self, message: str = "Workflow failed to complete"):
        super().__init__(message)


class MissingInputError(KeyError):
    """Raised in strict mode when placeholders have no input value."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            f"Missing input values for placeholders: {', '.join(self.missing)}"
        )

    def __str__(self) -> str:
        return str(self.args[0])
