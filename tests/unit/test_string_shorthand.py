"""
Unit tests for single shorthand tokens.
"""

import pytest
from typecheck_shorthand.shorthand import parse_string_shorthand
from typecheck_shorthand.shorthand.fragments import (
    AnyFragment,
    ArrayFragment,
    BooleanFragment,
    ClassInstanceFragment,
    PrimitiveFragment,
    StringFragment,
)


def schema_of(token):
    return parse_string_shorthand(token).fragment.to_schema()


class TestPrimitiveTokens:
    """Test keyword and passthrough tokens."""

    def test_string(self):
        """Test "string" compiles to a plain string type."""
        result = parse_string_shorthand("string")

        assert isinstance(result.fragment, StringFragment)
        assert result.fragment.to_schema() == {"type": "string"}
        assert result.is_required is True

    def test_nullable_number(self):
        """Test "number?" is nullable and not required."""
        result = parse_string_shorthand("number?")

        assert result.fragment.to_schema() == {"type": "number", "nullable": True}
        assert result.is_required is False

    def test_non_empty_string(self):
        """Test "string!" demands at least one character."""
        result = parse_string_shorthand("string!")

        assert result.fragment.to_schema() == {"type": "string", "minLength": 1}
        assert result.is_required is True

    def test_uuid(self):
        """Test "uuid" is a string with the uuid format."""
        assert schema_of("uuid") == {"type": "string", "format": "uuid"}

    def test_true_literal(self):
        """Test "true" is a boolean constant."""
        fragment = parse_string_shorthand("true").fragment

        assert isinstance(fragment, BooleanFragment)
        assert fragment.to_schema() == {"type": "boolean", "const": True}

    def test_false_literal_nullable(self):
        """Test "false?" keeps the constant and adds nullable."""
        result = parse_string_shorthand("false?")

        assert result.fragment.to_schema() == {"type": "boolean", "const": False, "nullable": True}
        assert result.is_required is False

    def test_any(self):
        """Test "any" is unconstrained."""
        fragment = parse_string_shorthand("any").fragment

        assert isinstance(fragment, AnyFragment)
        assert fragment.to_schema() == {}

    def test_any_nullable(self):
        """Test "any?" keeps only the nullable flag."""
        assert schema_of("any?") == {"nullable": True}

    @pytest.mark.parametrize("token", ["number", "integer", "boolean", "object", "null"])
    def test_passthrough_type_names(self, token):
        """Test unknown tokens are used verbatim as the type."""
        fragment = parse_string_shorthand(token).fragment

        assert isinstance(fragment, PrimitiveFragment)
        assert fragment.to_schema() == {"type": token}

    def test_presence_marker_ignored_for_number(self):
        """Test "!" is accepted but has no effect on non-string primitives."""
        result = parse_string_shorthand("number!")

        assert result.fragment.to_schema() == {"type": "number"}
        assert result.is_required is True

    def test_presence_and_nullable_on_string(self):
        """Test "string!?" is non-empty, nullable and optional."""
        result = parse_string_shorthand("string!?")

        assert result.fragment.to_schema() == {"type": "string", "minLength": 1, "nullable": True}
        assert result.is_required is False

    def test_uuid_is_case_sensitive(self):
        """Test only the lower-case "uuid" keyword gets the format."""
        assert schema_of("UUID") == {"type": "UUID"}


class TestArrayTokens:
    """Test the [] suffix."""

    def test_string_array(self):
        """Test "string[]" is an array of strings."""
        result = parse_string_shorthand("string[]")

        assert isinstance(result.fragment, ArrayFragment)
        assert result.fragment.to_schema() == {"type": "array", "items": {"type": "string"}}
        assert result.is_required is True

    def test_non_empty_array(self):
        """Test "string[]!" demands at least one item."""
        assert schema_of("string[]!") == {
            "type": "array",
            "items": {"type": "string"},
            "minItems": 1,
        }

    def test_array_of_non_empty_strings(self):
        """Test "string![]" applies the marker to the items."""
        assert schema_of("string![]") == {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        }

    def test_nullable_array(self):
        """Test "number[]?" makes the array itself nullable and optional."""
        result = parse_string_shorthand("number[]?")

        assert result.fragment.to_schema() == {
            "type": "array",
            "items": {"type": "number"},
            "nullable": True,
        }
        assert result.is_required is False

    def test_array_of_nullable_items(self):
        """Test "number?[]" makes the items nullable but keeps the field required."""
        result = parse_string_shorthand("number?[]")

        assert result.fragment.to_schema() == {
            "type": "array",
            "items": {"type": "number", "nullable": True},
        }
        assert result.is_required is True

    def test_nested_arrays(self):
        """Test "integer[][]" nests arrays."""
        assert schema_of("integer[][]") == {
            "type": "array",
            "items": {"type": "array", "items": {"type": "integer"}},
        }

    def test_array_of_class_instances(self):
        """Test "date[]" checks each item with instanceof."""
        assert schema_of("date[]") == {"type": "array", "items": {"instanceof": "date"}}


class TestClassInstanceTokens:
    """Test tokens naming native classes."""

    @pytest.mark.parametrize("token", ["buffer", "regexp", "function", "date"])
    def test_registered_classes(self, token):
        """Test every registered class compiles to instanceof."""
        result = parse_string_shorthand(token)

        assert isinstance(result.fragment, ClassInstanceFragment)
        assert result.fragment.to_schema() == {"instanceof": token}
        assert result.is_required is True

    def test_nullable_class_keeps_marker_in_parameter(self):
        """Test "date?" carries the "?" in the parameter, not a nullable flag."""
        result = parse_string_shorthand("date?")

        assert result.fragment.to_schema() == {"instanceof": "date?"}
        assert "nullable" not in result.fragment.to_schema()
        assert result.fragment.nullable is False
        assert result.is_required is False

    def test_class_names_are_case_insensitive(self):
        """Test "Date" and "BUFFER?" are lower-cased into the parameter."""
        assert schema_of("Date") == {"instanceof": "date"}
        assert schema_of("BUFFER?") == {"instanceof": "buffer?"}

    def test_presence_marker_hides_class_name(self):
        """Test "date!" is not a class token and passes through as a type name."""
        assert schema_of("date!") == {"type": "date"}

    def test_unregistered_class_passes_through(self):
        """Test an unknown class name is left for the compiler to reject."""
        assert schema_of("promise") == {"type": "promise"}


class TestRequiredness:
    """Test required-ness follows the raw token."""

    @pytest.mark.parametrize("token", ["string", "number", "uuid", "true", "any", "date", "string[]", "string!"])
    def test_required_without_question_mark(self, token):
        """Test tokens without "?" are required."""
        assert parse_string_shorthand(token).is_required is True

    @pytest.mark.parametrize("token", ["string?", "number?", "uuid?", "true?", "any?", "date?", "string[]?", "string!?"])
    def test_optional_with_question_mark(self, token):
        """Test tokens ending in "?" are optional."""
        assert parse_string_shorthand(token).is_required is False
