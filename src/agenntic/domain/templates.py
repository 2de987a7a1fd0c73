"""
Placeholder substitution for agent and task text.

Templates use ``{name}`` placeholders. A backslash escapes a brace so that
``\\{`` and ``\\}`` always render as literal braces.
"""

import re
from collections.abc import Mapping

_PLACEHOLDER = re.compile(r"\{(\w+)\}", re.ASCII)
_ESCAPED_LEFT = "\x00LEFT_BRACE\x00"
_ESCAPED_RIGHT = "\x00RIGHT_BRACE\x00"


def _protect_escapes(template: str) -> str:
    return template.replace("\\{", _ESCAPED_LEFT).replace("\\}", _ESCAPED_RIGHT)


def _restore_escapes(text: str) -> str:
    return text.replace(_ESCAPED_LEFT, "{").replace(_ESCAPED_RIGHT, "}")


def fill_template_string(
    template: str, values: Mapping[str, str | int | float]
) -> str:
    """
    Fill a template string with values from a mapping.

    Args:
        template: Text containing ``{key}`` placeholders
        values: Replacement values keyed by placeholder name

    Returns:
        The template with every known placeholder replaced. Unknown
        placeholders are kept verbatim, braces included.
    """

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in values:
            return str(values[key])
        return match.group(0)

    return _restore_escapes(_PLACEHOLDER.sub(_replace, _protect_escapes(template)))


def extract_placeholders(template: str) -> tuple[str, ...]:
    """Return placeholder names in order of first appearance, escapes ignored."""
    seen: dict[str, None] = {}
    for name in _PLACEHOLDER.findall(_protect_escapes(template)):
        seen.setdefault(name, None)
    return tuple(seen)
