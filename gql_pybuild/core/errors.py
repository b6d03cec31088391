"""Exceptions raised while building or rendering GraphQL documents.

Every check runs before the first fragment of a document is produced, so
a raised error always means that no output was generated for the call.
"""

from typing import Any

NAME_GRAMMAR = "/[_A-Za-z][_0-9A-Za-z]*/"
NAME_GRAMMAR_URL = "http://facebook.github.io/graphql/October2016/#sec-Names"

FIELD_NAME = "field name"
ALIAS = "alias"
ARGUMENT_NAME = "argument name"
OPERATION_NAME = "operation name"


class GraphQLBuilderError(Exception):
    """Base class for all errors raised by gql_pybuild."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidNameError(GraphQLBuilderError):
    """Raised when a name does not match the GraphQL name grammar.

    The render path uses the long message that points at the grammar;
    the option constructors use the short one (``short=True``).
    """

    def __init__(self, name: str, kind: str = FIELD_NAME, *, short: bool = False):
        self.name = name
        self.kind = kind
        if short:
            message = f"'{name}' is not a valid name."
        else:
            message = (
                f"'{name}' is an invalid name identifier in GraphQL. "
                f"A valid name matches {NAME_GRAMMAR}, see: {NAME_GRAMMAR_URL}"
            )
        super().__init__(message)


class InvalidOperationTypeError(GraphQLBuilderError):
    """Raised when an operation type is not query, mutation or subscription."""

    def __init__(self, operation_type: Any):
        self.operation_type = operation_type
        super().__init__(
            f"'{operation_type}' is an invalid operation type in GraphQL. "
            "A valid type is one of 'query', 'mutation', 'subscription'"
        )


class NilFieldError(GraphQLBuilderError):
    """Raised when a field list holds ``None`` instead of a Field."""

    def __init__(self):
        super().__init__(
            "nil Field is not allowed. Please initialize a correct Field "
            "with NewField(...) function or Field{...} literal"
        )


class CyclicFieldError(GraphQLBuilderError):
    """Raised when a field can reach itself through its children."""

    def __init__(self, field: Any):
        self.field = field
        name = getattr(field, "name", "")
        super().__init__(f"Field '{name}' is part of a cycle in the field graph")


class ArgumentTypeNotSupportedError(GraphQLBuilderError):
    """Raised by argument_any for values it does not know how to render."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"argument value of type '{type(value).__name__}' is not supported"
        )


class FieldCheckError(GraphQLBuilderError):
    """Adds context to a failed pre-render check; the cause is chained."""

    def __init__(self, context: str, cause: BaseException):
        self.context = context
        super().__init__(f"{context}: {cause}")


def root_cause(error: BaseException) -> BaseException:
    """Return the innermost error of an exception chain built with ``raise ... from``."""
    while error.__cause__ is not None:
        error = error.__cause__
    return error
