"""Field and Query nodes.

Both can be built as plain dataclass literals or through the chaining
setters, which return the node they modify. Names are not validated
while building; errors surface when the node is rendered.

Example:
    q = Query(
        TYPE_QUERY,
        fields=[
            Field(
                "courses",
                alias="Alias",
                arguments=[argument_int("uid", 123)],
                fields=fields("key", "id"),
            ),
        ],
    )
    q.render_to_string()  # 'query{Alias:courses(uid:123){key,id,},}'
"""

from collections.abc import Iterator
from dataclasses import dataclass, field as dc_field
from typing import Optional

from . import renderer
from .arguments import (
    Argument,
    argument_bool,
    argument_int,
    argument_string,
    argument_string_list,
)
from .cycles import check_cycle


# eq=False: fields compare by identity, which is also what cycle detection uses
@dataclass(eq=False)
class Field:
    """A selection in a GraphQL document."""
    name: str = ""
    alias: str = ""
    arguments: list[Argument] = dc_field(default_factory=list)
    fields: list[Optional["Field"]] = dc_field(default_factory=list)

    def set_alias(self, alias: str) -> "Field":
        self.alias = alias
        return self

    def set_arguments(self, *arguments: Argument) -> "Field":
        self.arguments = list(arguments)
        return self

    def add_arguments(self, *arguments: Argument) -> "Field":
        self.arguments.extend(arguments)
        return self

    def add_argument_int(self, key: str, value: int) -> "Field":
        return self.add_arguments(argument_int(key, value))

    def add_argument_string(self, key: str, value: str) -> "Field":
        return self.add_arguments(argument_string(key, value))

    def add_argument_string_list(self, key: str, *values: str) -> "Field":
        return self.add_arguments(argument_string_list(key, *values))

    def add_argument_bool(self, key: str, value: bool) -> "Field":
        return self.add_arguments(argument_bool(key, value))

    def set_fields(self, *fields: "Field") -> "Field":
        self.fields = list(fields)
        return self

    def add_fields(self, *fields: "Field") -> "Field":
        self.fields.extend(fields)
        return self

    def check_cycle(self) -> None:
        """Raise CyclicFieldError or NilFieldError for a malformed subtree."""
        check_cycle(self)

    def render(self) -> Iterator[str]:
        """Return a stream of text fragments for this field subtree."""
        return renderer.render_field(self)

    def render_to_string(self) -> str:
        return renderer.string_from_stream(self.render())


@dataclass
class Query:
    """A GraphQL operation: query, mutation or subscription."""
    operation_type: str
    operation_name: str = ""
    fields: list[Optional[Field]] = dc_field(default_factory=list)

    def set_operation_name(self, name: str) -> "Query":
        self.operation_name = name
        return self

    def set_fields(self, *fields: Field) -> "Query":
        self.fields = list(fields)
        return self

    def add_fields(self, *fields: Field) -> "Query":
        self.fields.extend(fields)
        return self

    def render(self) -> Iterator[str]:
        """Return a stream of text fragments for the whole operation.

        Raises:
            GraphQLBuilderError: If any check fails; no fragments are produced
        """
        return renderer.render_query(self)

    def render_to_string(self) -> str:
        return renderer.string_from_stream(self.render())

    def to_json_body(self) -> str:
        """Return the request body ``{"query":"..."}`` for this operation."""
        return renderer.to_json_body(self)


def fields(*names: str) -> list[Field]:
    """Build leaf fields from names, e.g. ``fields("id", "name")``."""
    return [Field(name) for name in names]
