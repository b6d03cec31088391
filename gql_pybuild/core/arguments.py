"""Field arguments and their value renderers.

An Argument pairs a key with an ArgumentValue. Values render themselves
to GraphQL literal syntax; the typed constructors below cover the common
kinds and any object implementing the ArgumentValue protocol can be used
for others.

Example usage:
    from gql_pybuild.core.arguments import argument_int, argument_string_list

    args = [
        argument_int("uid", 123),
        argument_string_list("blocked_nds", "nd013", "nd014"),
    ]
    # renders as uid:123 and blocked_nds:["nd013","nd014"]

Keys are not validated here. Invalid keys are reported when the field
that owns the argument is rendered.
"""

import json
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .errors import ArgumentTypeNotSupportedError


@runtime_checkable
class ArgumentValue(Protocol):
    """Protocol for argument values.

    Implement ``render`` to return the GraphQL literal for the value.
    """

    def render(self) -> str:
        """Return the GraphQL text of the value."""
        ...


def quote(value: str) -> str:
    """Quote a string using JSON string escaping."""
    return json.dumps(value, ensure_ascii=False)


def _render_int(value: int) -> str:
    # bool is an int subclass but renders as true/false, not 1/0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ArgumentTypeNotSupportedError(value)
    return str(value)


def _render_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class IntValue:
    value: int

    def render(self) -> str:
        return _render_int(self.value)


@dataclass(frozen=True)
class StringValue:
    value: str

    def render(self) -> str:
        return quote(self.value)


@dataclass(frozen=True)
class BoolValue:
    value: bool

    def render(self) -> str:
        return _render_bool(self.value)


@dataclass(frozen=True)
class StringListValue:
    values: tuple[str, ...]

    def render(self) -> str:
        return "[" + ",".join(quote(v) for v in self.values) + "]"


@dataclass(frozen=True)
class IntListValue:
    values: tuple[int, ...]

    def render(self) -> str:
        return "[" + ",".join(_render_int(v) for v in self.values) + "]"


@dataclass(frozen=True)
class BoolListValue:
    values: tuple[bool, ...]

    def render(self) -> str:
        return "[" + ",".join(_render_bool(v) for v in self.values) + "]"


@dataclass(frozen=True)
class ObjectValue:
    """An input object literal, e.g. ``{first:10,after:"abc"}``."""
    arguments: tuple["Argument", ...]

    def render(self) -> str:
        return "{" + ",".join(arg.render() for arg in self.arguments) + "}"


@dataclass(frozen=True)
class ObjectListValue:
    objects: tuple[ObjectValue, ...]

    def render(self) -> str:
        return "[" + ",".join(obj.render() for obj in self.objects) + "]"


@dataclass(frozen=True)
class Argument:
    """A single ``key:value`` pair inside a field's parentheses."""
    key: str
    value: ArgumentValue

    def render(self) -> str:
        return f"{self.key}:{self.value.render()}"

    def keys(self) -> list[str]:
        """Return this key and the keys of any nested input object."""
        result = [self.key]
        if isinstance(self.value, ObjectValue):
            for arg in self.value.arguments:
                result.extend(arg.keys())
        elif isinstance(self.value, ObjectListValue):
            for obj in self.value.objects:
                for arg in obj.arguments:
                    result.extend(arg.keys())
        return result


def argument_int(key: str, value: int) -> Argument:
    return Argument(key, IntValue(value))


def argument_string(key: str, value: str) -> Argument:
    return Argument(key, StringValue(value))


def argument_bool(key: str, value: bool) -> Argument:
    return Argument(key, BoolValue(value))


def argument_string_list(key: str, *values: str) -> Argument:
    return Argument(key, StringListValue(tuple(values)))


def argument_int_list(key: str, *values: int) -> Argument:
    return Argument(key, IntListValue(tuple(values)))


def argument_bool_list(key: str, *values: bool) -> Argument:
    return Argument(key, BoolListValue(tuple(values)))


def argument_custom_type(key: str, *arguments: Argument) -> Argument:
    """Build an input object argument from nested arguments."""
    return Argument(key, ObjectValue(tuple(arguments)))


def argument_custom_type_list(key: str, *objects: list[Argument]) -> Argument:
    """Build a list of input objects; each object is a list of arguments."""
    return Argument(
        key, ObjectListValue(tuple(ObjectValue(tuple(obj)) for obj in objects))
    )


def argument_any(key: str, value: Any) -> Argument:
    """Build an argument by dispatching on the Python type of ``value``.

    Supports bool, int, str and lists made of one of those.

    Raises:
        ArgumentTypeNotSupportedError: For any other value
    """
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return argument_bool(key, value)
    if isinstance(value, int):
        return argument_int(key, value)
    if isinstance(value, str):
        return argument_string(key, value)
    if isinstance(value, (list, tuple)):
        if all(isinstance(v, bool) for v in value):
            return argument_bool_list(key, *value)
        if all(isinstance(v, int) and not isinstance(v, bool) for v in value):
            return argument_int_list(key, *value)
        if all(isinstance(v, str) for v in value):
            return argument_string_list(key, *value)
    raise ArgumentTypeNotSupportedError(value)
