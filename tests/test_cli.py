"""Tests for the command-line interface."""

import click
import pytest
from click.testing import CliRunner

from gql_pybuild.cli import main, parse_argument


@pytest.fixture
def runner():
    return CliRunner()


class TestRenderCommand:
    """Tests for `gql-pybuild render`."""

    def test_render_text(self, runner):
        result = runner.invoke(main, ["render", "-f", "users.id", "-f", "users.username"])
        assert result.exit_code == 0
        assert result.output.strip() == "query{users{id,username,},}"

    def test_render_json_with_arguments(self, runner):
        result = runner.invoke(
            main,
            [
                "render",
                "-n", "another_test",
                "-f", "users.id",
                "-f", "users.username",
                "-f", "users.threads.title",
                "-f", "users.threads.created_at",
                "-a", "users.threads:title=A Good Title",
                "--json",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == (
            '{"query":"query another_test{users{id,username,'
            'threads(title:\\"A Good Title\\"){title,created_at,},},}"}'
        )

    def test_mutation_type(self, runner):
        result = runner.invoke(main, ["render", "-t", "mutation", "-f", "logout"])
        assert result.exit_code == 0
        assert result.output.strip() == "mutation{logout,}"

    def test_invalid_name_reports_error(self, runner):
        result = runner.invoke(main, ["render", "-f", "user-name"])
        assert result.exit_code == 1
        assert "'user-name' is an invalid name identifier in GraphQL" in result.output

    def test_argument_for_unknown_field(self, runner):
        result = runner.invoke(main, ["render", "-f", "users.id", "-a", "posts:first=1"])
        assert result.exit_code == 2

    def test_unknown_operation_type(self, runner):
        result = runner.invoke(main, ["render", "-t", "muTatio", "-f", "id"])
        assert result.exit_code == 2


class TestParseArgument:
    """Tests for --arg parsing."""

    def test_int(self):
        path, arg = parse_argument("users:first=10")
        assert path == "users"
        assert arg.render() == "first:10"

    def test_bool(self):
        _, arg = parse_argument("users:active=true")
        assert arg.render() == "active:true"

    def test_string(self):
        _, arg = parse_argument("users.threads:title=A Good Title")
        assert arg.render() == 'title:"A Good Title"'

    def test_malformed(self):
        with pytest.raises(click.BadParameter):
            parse_argument("users-first-10")

    def test_non_ascii_digits_are_strings(self):
        _, arg = parse_argument("users:first=²")
        assert arg.render() == 'first:"²"'


class TestRenderArgumentValues:
    """Tests for argument values passed on the command line."""

    def test_non_ascii_digit_value(self):
        result = CliRunner().invoke(main, ["render", "-f", "users", "-a", "users:first=٣"])
        assert result.exit_code == 0
        assert result.output.strip() == 'query{users(first:"٣"),}'
