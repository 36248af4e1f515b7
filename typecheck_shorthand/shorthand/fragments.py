"""
Schema fragment definitions for compiled shorthand.

This module defines the node types produced by the shorthand parser. Each
node renders itself into a JSON Schema (Draft 7 plus the `nullable` and
`instanceof` keywords) document node.

Type Hierarchy:
    FragmentNode (abstract)
    ├── ObjectFragment: Object with properties, required names and directives
    ├── ArrayFragment: Array with an item fragment
    ├── StringFragment: String, optionally with a format or non-empty constraint
    ├── BooleanFragment: Boolean literal (const true/false)
    ├── PrimitiveFragment: Any other JSON type name, passed through verbatim
    ├── AnyFragment: Matches every value
    ├── UnionFragment: One of several fragments (anyOf)
    ├── ClassInstanceFragment: Native class membership (instanceof)
    └── RawFragment: Pre-built schema value passed through unchanged

Fragments are frozen once built; the parser assembles all attributes first
and constructs each node in one step.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class FragmentNode(ABC):
    """
    Abstract base class for all fragment types.

    Every fragment can be rendered to a schema document node and reports
    whether it accepts null.
    """

    @abstractmethod
    def to_schema(self) -> Any:
        """
        Render this fragment as a JSON-compatible schema node.

        Returns:
            The schema node, usually a dict
        """
        pass

    @property
    def nullable(self) -> bool:
        return False


@dataclass(frozen=True)
class ObjectFragment(FragmentNode):
    """
    Represents an object built from a shorthand mapping.

    Example shorthand:
        {"name": "string", "age": "number?", "$additionalProperties": False}

    Rendered schema:
        {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "age": {"type": "number", "nullable": true}
            },
            "required": ["name"],
            "additionalProperties": false
        }

    Attributes:
        properties: Field name to fragment, in shorthand order
        required: Required field names, or None when no field is required
        directives: Schema-level settings from `$`-prefixed keys, prefix stripped
    """

    properties: Mapping[str, FragmentNode] = field(default_factory=dict)
    required: Optional[Tuple[str, ...]] = None
    directives: Mapping[str, Any] = field(default_factory=dict)

    @property
    def nullable(self) -> bool:
        return render_schema(self.directives.get("nullable")) is True

    def to_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {
                name: fragment.to_schema() for name, fragment in self.properties.items()
            },
        }

        if self.required:
            schema["required"] = list(self.required)

        for name, value in self.directives.items():
            schema[name] = render_schema(value)

        return schema


@dataclass(frozen=True)
class ArrayFragment(FragmentNode):
    """
    Represents an array whose items all match one fragment.

    Produced by the `[]` suffix. A trailing "!" after the brackets
    ("string[]!") demands at least one item, while "string![]" applies the
    marker to the item type instead.

    Attributes:
        items: Fragment every item must match
        min_items: Minimum number of items (None = no limit)
        is_nullable: Whether null is accepted in place of the array
    """

    items: FragmentNode
    min_items: Optional[int] = None
    is_nullable: bool = False

    @property
    def nullable(self) -> bool:
        return self.is_nullable

    def to_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": "array", "items": self.items.to_schema()}
        if self.min_items is not None:
            schema["minItems"] = self.min_items
        return _with_nullable(schema, self.is_nullable)


@dataclass(frozen=True)
class StringFragment(FragmentNode):
    """
    Represents a string.

    Attributes:
        format: Named string format such as "uuid" (None = any string)
        min_length: Minimum length, 1 for the "string!" form
        is_nullable: Whether null is accepted
    """

    format: Optional[str] = None
    min_length: Optional[int] = None
    is_nullable: bool = False

    @property
    def nullable(self) -> bool:
        return self.is_nullable

    def to_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": "string"}
        if self.format is not None:
            schema["format"] = self.format
        if self.min_length is not None:
            schema["minLength"] = self.min_length
        return _with_nullable(schema, self.is_nullable)


@dataclass(frozen=True)
class BooleanFragment(FragmentNode):
    """Boolean literal produced by the "true" and "false" tokens."""

    const: bool
    is_nullable: bool = False

    @property
    def nullable(self) -> bool:
        return self.is_nullable

    def to_schema(self) -> Dict[str, Any]:
        return _with_nullable({"type": "boolean", "const": self.const}, self.is_nullable)


@dataclass(frozen=True)
class PrimitiveFragment(FragmentNode):
    """
    Any token the parser does not recognise, used verbatim as the JSON type.

    "number", "integer", "boolean", "object" and "null" all land here. Type
    names the validator does not know are rejected at compile time, not here.
    """

    type_name: str
    is_nullable: bool = False

    @property
    def nullable(self) -> bool:
        return self.is_nullable

    def to_schema(self) -> Dict[str, Any]:
        return _with_nullable({"type": self.type_name}, self.is_nullable)


@dataclass(frozen=True)
class AnyFragment(FragmentNode):
    """Unconstrained fragment produced by the "any" token."""

    is_nullable: bool = False

    @property
    def nullable(self) -> bool:
        return self.is_nullable

    def to_schema(self) -> Dict[str, Any]:
        return _with_nullable({}, self.is_nullable)


@dataclass(frozen=True)
class UnionFragment(FragmentNode):
    """
    Represents a list of shorthand variants.

    Example shorthand:
        ["string", "number"]

    Rendered schema:
        {"anyOf": [{"type": "string"}, {"type": "number"}]}

    Attributes:
        options: Variant fragments, in shorthand order. A nested list stays a
            bare tuple of fragments and renders as a JSON list.
    """

    options: Tuple[Any, ...] = ()

    def to_schema(self) -> Dict[str, Any]:
        return {"anyOf": [render_schema(option) for option in self.options]}


@dataclass(frozen=True)
class ClassInstanceFragment(FragmentNode):
    """
    Native class membership check.

    The parameter is the lower-cased shorthand token including any trailing
    "?". Nullability lives inside the parameter and is decoded by the
    `instanceof` keyword itself, so the fragment never carries a schema-level
    `nullable` flag and always counts as non-nullable here.

    Attributes:
        param: "<name>" or "<name>?", e.g. "date?"
    """

    param: str

    def to_schema(self) -> Dict[str, Any]:
        return {"instanceof": self.param}


@dataclass(frozen=True)
class RawFragment(FragmentNode):
    """
    Pre-built schema value passed through the parser unchanged.

    Wraps booleans and numbers used as directive values as well as full
    schema dicts supplied with raw().

    Attributes:
        schema: The value emitted verbatim
    """

    schema: Any

    @property
    def nullable(self) -> bool:
        return isinstance(self.schema, Mapping) and self.schema.get("nullable") is True

    def to_schema(self) -> Any:
        return self.schema


def raw(schema: Any) -> RawFragment:
    """
    Mark a value as a pre-built schema fragment.

    Use this to embed a hand-written JSON Schema dict inside a shorthand
    mapping; without it the dict would be read as a nested shorthand object.

    Example:
        ```python
        shorthand = {
            "port": raw({"type": "integer", "minimum": 1, "maximum": 65535}),
        }
        ```
    """
    return RawFragment(schema=schema)


def render_schema(value: Any) -> Any:
    """
    Render parser output into a JSON-compatible schema document.

    Fragments render through to_schema(); the bare variant sequences kept for
    directives render as lists; anything else is returned unchanged.
    """
    if isinstance(value, FragmentNode):
        return value.to_schema()
    if isinstance(value, (list, tuple)):
        return [render_schema(item) for item in value]
    return value


def _with_nullable(schema: Dict[str, Any], nullable: bool) -> Dict[str, Any]:
    if nullable:
        schema["nullable"] = True
    return schema

