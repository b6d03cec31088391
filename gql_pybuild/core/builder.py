"""Builder entry points for fields and queries.

Two styles are supported:

* Chaining: ``make_query(...)`` / ``make_field(...)`` return nodes whose
  setters return the node itself. Names are checked when rendering.
* Options: ``new_query(type, *options)`` / ``new_field(name, *options)``
  apply option callables in order and validate every name immediately,
  raising InvalidNameError with the short message.

Example:
    q = new_query(
        TYPE_QUERY,
        of_name("another_test"),
        of_field(
            "users",
            of_fields("id", "username"),
            of_field(
                "threads",
                of_arguments(argument_string("title", "A Good Title")),
                of_fields("title", "created_at"),
            ),
        ),
    )
"""

from collections.abc import Callable
from typing import Union

from .arguments import Argument
from .errors import ALIAS, FIELD_NAME, OPERATION_NAME
from .names import validate_name
from .nodes import Field, Query
from .renderer import operation_token

Option = Callable[[Union[Query, Field]], None]


def make_query(operation_type: str) -> Query:
    """Start a chained query. Validation is deferred to rendering."""
    return Query(operation_type)


def make_field(name: str = "") -> Field:
    """Start a chained field. Validation is deferred to rendering."""
    return Field(name)


def new_query(operation_type: str, *options: Option) -> Query:
    """Build a query from options.

    Raises:
        InvalidOperationTypeError: If the operation type is unknown
        InvalidNameError: If an option carries an invalid name
    """
    operation_token(operation_type)
    query = Query(operation_type)
    for option in options:
        option(query)
    return query


def new_field(name: str, *options: Option) -> Field:
    """Build a field from options.

    Raises:
        InvalidNameError: If the name or an option's name is invalid
    """
    validate_name(name, FIELD_NAME, short=True)
    node = Field(name)
    for option in options:
        option(node)
    return node


# =============================================================================
# Options
# =============================================================================


def _require(option: str, node, kind: type) -> None:
    """Raise TypeError when an option is applied to the wrong node kind."""
    if not isinstance(node, kind):
        raise TypeError(
            f"{option}() applies to a {kind.__name__}, not {type(node).__name__}"
        )


def of_name(name: str) -> Option:
    """Set the operation name of a query. Query only."""
    def apply(query: Query) -> None:
        _require("of_name", query, Query)
        validate_name(name, OPERATION_NAME, short=True)
        query.operation_name = name
    return apply


def of_alias(alias: str) -> Option:
    """Set the alias of a field. Field only."""
    def apply(node: Field) -> None:
        _require("of_alias", node, Field)
        validate_name(alias, ALIAS, short=True)
        node.alias = alias
    return apply


def of_field(name: str, *options: Option) -> Option:
    """Add a child field built with ``new_field(name, *options)``."""
    def apply(parent: Union[Query, Field]) -> None:
        parent.fields.append(new_field(name, *options))
    return apply


def of_fields(*names: str) -> Option:
    """Add one leaf field per name."""
    def apply(parent: Union[Query, Field]) -> None:
        for name in names:
            parent.fields.append(new_field(name))
    return apply


def of_arguments(*arguments: Argument) -> Option:
    """Append arguments to a field. Field only."""
    def apply(node: Field) -> None:
        _require("of_arguments", node, Field)
        node.arguments.extend(arguments)
    return apply


# =============================================================================
# Selection paths
# =============================================================================


def fields_from_paths(*paths: str) -> list[Field]:
    """Build a field tree from dotted selection paths.

    Paths sharing a prefix share the same fields, e.g.
    ``fields_from_paths("users.id", "users.threads.title")`` gives
    ``users{id,threads{title,},}``. Names are checked at render time.
    """
    roots: list[Field] = []
    for path in paths:
        level = roots
        for part in path.split("."):
            node = next((f for f in level if f.name == part), None)
            if node is None:
                node = Field(part)
                level.append(node)
            level = node.fields
    return roots


def find_field(roots: list[Field], path: str) -> Field | None:
    """Return the field at a dotted path in a tree built by fields_from_paths."""
    node = None
    level = roots
    for part in path.split("."):
        node = next((f for f in level if f.name == part), None)
        if node is None:
            return None
        level = node.fields
    return node
