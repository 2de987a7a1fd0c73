"""Tests for placeholder substitution."""

from agenntic.domain.templates import extract_placeholders, fill_template_string


class TestFillTemplateString:
    """Tests for fill_template_string()."""

    def test_replaces_single_placeholder(self) -> None:
        assert fill_template_string("Hello, {name}!", {"name": "Alice"}) == (
            "Hello, Alice!"
        )

    def test_replaces_multiple_placeholders(self) -> None:
        result = fill_template_string(
            "Hello, {firstName} {lastName}!", {"firstName": "John", "lastName": "Doe"}
        )

        assert result == "Hello, John Doe!"

    def test_numeric_values_are_stringified(self) -> None:
        result = fill_template_string("You have {count} new messages.", {"count": 5})

        assert result == "You have 5 new messages."

    def test_missing_values_leave_placeholder_intact(self) -> None:
        result = fill_template_string(
            "Hello, {name}! You are {age} years old.", {"name": "Bob"}
        )

        assert result == "Hello, Bob! You are {age} years old."

    def test_escaped_braces_become_literal(self) -> None:
        result = fill_template_string("Set is written as \\{a, b, c\\}.", {})

        assert result == "Set is written as {a, b, c}."

    def test_escaped_placeholder_is_not_substituted(self) -> None:
        result = fill_template_string("Use \\{name\\} for {name}", {"name": "Ada"})

        assert result == "Use {name} for Ada"

    def test_no_placeholders_returns_template(self) -> None:
        result = fill_template_string("No placeholders here.", {"irrelevant": "x"})

        assert result == "No placeholders here."

    def test_empty_template(self) -> None:
        assert fill_template_string("", {"any": "value"}) == ""

    def test_empty_values_leave_all_placeholders(self) -> None:
        template = "Hello, {name}! Welcome to {place}."

        assert fill_template_string(template, {}) == template

    def test_repeated_placeholder(self) -> None:
        assert fill_template_string("{greeting}, {greeting}!", {"greeting": "Hi"}) == (
            "Hi, Hi!"
        )

    def test_values_with_special_characters(self) -> None:
        result = fill_template_string("Password: {password}", {"password": "P@$$w0rd!\\1"})

        assert result == "Password: P@$$w0rd!\\1"

    def test_overlapping_keys_match_whole_token(self) -> None:
        result = fill_template_string("{name} {namex}", {"name": "a", "namex": "b"})

        assert result == "a b"

    def test_substituted_values_are_not_rescanned(self) -> None:
        result = fill_template_string("{a}", {"a": "{b}", "b": "nope"})

        assert result == "{b}"

    def test_non_identifier_braces_untouched(self) -> None:
        result = fill_template_string('{"key": 1} {x-y}', {"key": "v", "x": "1"})

        assert result == '{"key": 1} {x-y}'

    def test_non_ascii_names_are_not_placeholders(self) -> None:
        """Only ASCII word characters form a placeholder name."""
        result = fill_template_string(
            "{café} {名前} {topic}", {"café": "X", "名前": "Y", "topic": "owls"}
        )

        assert result == "{café} {名前} owls"


class TestExtractPlaceholders:
    """Tests for extract_placeholders()."""

    def test_returns_names_in_order(self) -> None:
        assert extract_placeholders("{b} then {a}") == ("b", "a")

    def test_deduplicates(self) -> None:
        assert extract_placeholders("{a} {a} {b}") == ("a", "b")

    def test_ignores_escaped(self) -> None:
        assert extract_placeholders("\\{a\\} {b}") == ("b",)

    def test_empty_template(self) -> None:
        assert extract_placeholders("") == ()

    def test_ignores_non_ascii_names(self) -> None:
        assert extract_placeholders("{café} {name}") == ("name",)
