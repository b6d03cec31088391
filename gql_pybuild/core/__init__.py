"""Core modules for building GraphQL documents."""

from .arguments import (
    Argument,
    ArgumentValue,
    argument_any,
    argument_bool,
    argument_bool_list,
    argument_custom_type,
    argument_custom_type_list,
    argument_int,
    argument_int_list,
    argument_string,
    argument_string_list,
)
from .builder import (
    find_field,
    fields_from_paths,
    make_field,
    make_query,
    new_field,
    new_query,
    of_alias,
    of_arguments,
    of_field,
    of_fields,
    of_name,
)
from .cycles import check_cycle
from .errors import (
    ArgumentTypeNotSupportedError,
    CyclicFieldError,
    FieldCheckError,
    GraphQLBuilderError,
    InvalidNameError,
    InvalidOperationTypeError,
    NilFieldError,
    root_cause,
)
from .names import is_valid_name, validate_name
from .nodes import Field, Query, fields
from .renderer import (
    TYPE_MUTATION,
    TYPE_QUERY,
    TYPE_SUBSCRIPTION,
    OperationType,
    string_from_stream,
)

__all__ = [
    # Arguments
    "Argument",
    "ArgumentValue",
    "argument_any",
    "argument_bool",
    "argument_bool_list",
    "argument_custom_type",
    "argument_custom_type_list",
    "argument_int",
    "argument_int_list",
    "argument_string",
    "argument_string_list",
    # Nodes
    "Field",
    "Query",
    "fields",
    # Builder
    "make_field",
    "make_query",
    "new_field",
    "new_query",
    "of_alias",
    "of_arguments",
    "of_field",
    "of_fields",
    "of_name",
    "fields_from_paths",
    "find_field",
    # Rendering
    "OperationType",
    "TYPE_QUERY",
    "TYPE_MUTATION",
    "TYPE_SUBSCRIPTION",
    "string_from_stream",
    "check_cycle",
    # Names
    "is_valid_name",
    "validate_name",
    # Errors
    "GraphQLBuilderError",
    "InvalidNameError",
    "InvalidOperationTypeError",
    "NilFieldError",
    "CyclicFieldError",
    "ArgumentTypeNotSupportedError",
    "FieldCheckError",
    "root_cause",
]
