"""Tests for GraphQL name validation."""

import pytest

from gql_pybuild.core.errors import InvalidNameError
from gql_pybuild.core.names import is_valid_name, validate_name

LONG_MESSAGE = (
    "'{}' is an invalid name identifier in GraphQL. A valid name matches "
    "/[_A-Za-z][_0-9A-Za-z]*/, see: http://facebook.github.io/graphql/October2016/#sec-Names"
)


class TestIsValidName:
    """Tests for is_valid_name."""

    @pytest.mark.parametrize(
        "name", ["a", "_", "users", "created_at", "_1x1_1x1_", "Alias", "A9", "__typename"]
    )
    def test_valid(self, name):
        assert is_valid_name(name)

    @pytest.mark.parametrize(
        "name", ["", "1abc", "x-x", "x x", "我", "_我", "Lets_Have_An_Alias看", "café", "a\n", "$var"]
    )
    def test_invalid(self, name):
        assert not is_valid_name(name)

    def test_non_string(self):
        assert not is_valid_name(None)


class TestValidateName:
    """Tests for validate_name."""

    def test_valid_name_passes(self):
        validate_name("users")

    def test_long_message(self):
        with pytest.raises(InvalidNameError) as exc_info:
            validate_name("x-x")
        assert str(exc_info.value) == LONG_MESSAGE.format("x-x")
        assert exc_info.value.name == "x-x"

    def test_short_message(self):
        with pytest.raises(InvalidNameError) as exc_info:
            validate_name("我", short=True)
        assert str(exc_info.value) == "'我' is not a valid name."

    def test_kind_is_recorded(self):
        with pytest.raises(InvalidNameError) as exc_info:
            validate_name("", "alias")
        assert exc_info.value.kind == "alias"
