"""
Prompt text used to compose agent requests.

This module provides:
- Fixed templates for the agent personality, task prompt and context section
- json_output: helper for expected outputs that ask for a JSON structure

These are plain strings rendered with fill_template_string; no model
specific formatting happens here.
"""

import json
from typing import Any

# =============================================================================
# PROMPT TEMPLATES
# =============================================================================

PERSONALITY_TEMPLATE = "You are a {role}. {background}.\nYour goal is: {goal}."

TASK_CONTEXT_TEMPLATE = (
    "{taskPrompt}\n\nThis is the context you're working with:\n{context}"
)

EXPECTED_OUTPUT_TEMPLATE = (
    "Your final response must follow the following guidelines: {expectedOutput}. "
    "Your answer must include the full content without summarizing."
)

# =============================================================================
# STRUCTURED OUTPUT HELPERS
# =============================================================================

JSON_STRING_PREFIX = "A JSON object that follows this structure:\n\n"


def json_output(value: Any, description: str, prefix: str | None = None) -> str:
    """
    Describe a JSON response shape for use as a task's expected output.

    Args:
        value: Example object, serialised into the text
        description: What the object represents (may be empty)
        prefix: Replaces the default lead-in sentence

    Returns:
        Text combining the prefix, the description and the example

    Raises:
        ValueError: If value cannot be serialised to JSON
    """
    lead = prefix or JSON_STRING_PREFIX
    desc = f"{description}\n\n" if description else ""

    try:
        example = f"Example:\n\n{json.dumps(value)}"
    except (TypeError, ValueError) as err:
        raise ValueError("Invalid JSON object provided.") from err

    return f"{lead}{desc}{example}"
