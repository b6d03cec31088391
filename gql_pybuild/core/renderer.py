"""Render fields and queries to GraphQL text.

Output is produced as a stream of string fragments in left-to-right
tree order. All validation (operation type, names, argument keys,
missing fields and cycles) runs before the stream is handed out, so a
caller either gets an exception and no fragments, or a stream that
completes.

Output format is compact, with a trailing comma after every field in a
selection set:

    query another_test{users{id,username,},}
"""

import logging
from collections.abc import Iterable, Iterator
from enum import Enum

from pydantic import BaseModel

from .cycles import check_cycle
from .errors import (
    ALIAS,
    ARGUMENT_NAME,
    FIELD_NAME,
    OPERATION_NAME,
    CyclicFieldError,
    FieldCheckError,
    InvalidOperationTypeError,
    NilFieldError,
)
from .names import validate_name

logger = logging.getLogger(__name__)


class OperationType(Enum):
    """GraphQL operation types."""
    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


TYPE_QUERY = OperationType.QUERY.value
TYPE_MUTATION = OperationType.MUTATION.value
TYPE_SUBSCRIPTION = OperationType.SUBSCRIPTION.value

VALID_OPERATION_TYPES = (TYPE_QUERY, TYPE_MUTATION, TYPE_SUBSCRIPTION)


class RequestBody(BaseModel):
    """JSON envelope sent to a GraphQL endpoint."""
    query: str


def operation_token(operation_type) -> str:
    """Return the literal token for an operation type.

    Raises:
        InvalidOperationTypeError: If it is not query, mutation or subscription
    """
    if isinstance(operation_type, OperationType):
        return operation_type.value
    if operation_type not in VALID_OPERATION_TYPES:
        raise InvalidOperationTypeError(operation_type)
    return operation_type


# =============================================================================
# Checks
# =============================================================================


def check_field(field) -> None:
    """Run every pre-render check on a field subtree.

    The cycle check runs first so the walk in _check_subtree is known to
    terminate.
    """
    if field is None:
        raise NilFieldError()
    try:
        check_cycle(field)
    except (CyclicFieldError, NilFieldError) as exc:
        raise FieldCheckError(f"field '{field.name}' failed the cycle check", exc) from exc
    _check_subtree(field)


def _check_subtree(field) -> None:
    # Fields are visited in document order so the first bad name is reported.
    pending = [field]
    while pending:
        node = pending.pop()
        if node.alias:
            validate_name(node.alias, ALIAS)
        validate_name(node.name, FIELD_NAME)
        for arg in node.arguments:
            for key in arg.keys():
                validate_name(key, ARGUMENT_NAME)
            # Unsupported values raise here rather than mid-stream.
            arg.render()
        pending.extend(reversed(node.fields))


def check_query(query) -> None:
    """Run every pre-render check on a query and its fields."""
    operation_token(query.operation_type)
    if query.operation_name:
        validate_name(query.operation_name, OPERATION_NAME)
    for field in query.fields:
        check_field(field)


# =============================================================================
# Emission
# =============================================================================


def _push_selection(pending: list, fields) -> None:
    """Schedule ``{child,child,}`` on a stack popped from the end."""
    pending.append("}")
    for child in reversed(fields):
        pending.append(",")
        pending.append(child)
    pending.append("{")


def _emit(pending: list) -> Iterator[str]:
    # Items are literal fragments or fields still to be expanded.
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            yield item
            continue

        if item.alias:
            yield item.alias
            yield ":"
        yield item.name

        if item.arguments:
            yield "("
            for i, arg in enumerate(item.arguments):
                if i:
                    yield ","
                yield arg.render()
            yield ")"

        if item.fields:
            _push_selection(pending, item.fields)


def _query_chunks(query) -> Iterator[str]:
    yield operation_token(query.operation_type)
    if query.operation_name:
        yield " "
        yield query.operation_name
    pending: list = []
    _push_selection(pending, query.fields)
    yield from _emit(pending)


def render_field(field) -> Iterator[str]:
    """Check a field subtree and return a stream of its text fragments."""
    check_field(field)
    logger.debug("Rendering field %r", field.name)
    return _emit([field])


def render_query(query) -> Iterator[str]:
    """Check a query and return a stream of its text fragments."""
    check_query(query)
    logger.debug(
        "Rendering %s %r with %d top-level fields",
        operation_token(query.operation_type),
        query.operation_name,
        len(query.fields),
    )
    return _query_chunks(query)


def string_from_stream(chunks: Iterable[str]) -> str:
    """Drain a fragment stream into one string."""
    return "".join(chunks)


def to_json_body(query) -> str:
    """Render a query and wrap it as ``{"query":"..."}``."""
    text = string_from_stream(render_query(query))
    return RequestBody(query=text).model_dump_json()
