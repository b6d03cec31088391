"""Shared fixtures for the gql_pybuild test suite."""

import pytest

from gql_pybuild.core import (
    Field,
    Query,
    TYPE_QUERY,
    argument_int,
    argument_string_list,
    fields,
)


@pytest.fixture
def courses_field():
    """Aliased field with int and string-list arguments and two children."""
    return Field(
        "courses",
        alias="Alias",
        arguments=[
            argument_int("uid", 123),
            argument_string_list("blocked_nds", "nd013", "nd014"),
        ],
        fields=fields("key", "id"),
    )


@pytest.fixture
def courses_query(courses_field):
    return Query(TYPE_QUERY, "", [courses_field])


@pytest.fixture
def cyclic_pair():
    """Two fields that reference each other: f -> f2 -> f."""
    f = Field(
        "courses",
        alias="Alias",
        arguments=[argument_int("uid", 123)],
        fields=fields(""),
    )
    f2 = Field(fields=fields(""))
    f2.fields[0] = f
    f.fields[0] = f2
    return f, f2
