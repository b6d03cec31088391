"""Command-line interface for gql-pybuild."""

import logging

import click

from .core.arguments import argument_bool, argument_int, argument_string
from .core.builder import fields_from_paths, find_field
from .core.errors import GraphQLBuilderError
from .core.nodes import Query
from .core.renderer import VALID_OPERATION_TYPES


def parse_argument(spec: str):
    """Split ``PATH:KEY=VALUE`` into a field path and an Argument."""
    path, sep, assignment = spec.partition(":")
    key, eq, value = assignment.partition("=")
    if not sep or not eq or not path or not key:
        raise click.BadParameter(
            f"'{spec}' should look like PATH:KEY=VALUE", param_hint="--arg"
        )
    if value.isascii() and value.isdigit():
        return path, argument_int(key, int(value))
    if value in ("true", "false"):
        return path, argument_bool(key, value == "true")
    return path, argument_string(key, value)


@click.group()
@click.version_option(package_name="gql-pybuild")
def main():
    """Build GraphQL query documents from the command line."""
    pass


@main.command()
@click.option(
    "--type",
    "-t",
    "operation_type",
    default="query",
    type=click.Choice(VALID_OPERATION_TYPES),
    help="Operation type (default: query).",
)
@click.option(
    "--name",
    "-n",
    default="",
    help="Operation name.",
)
@click.option(
    "--field",
    "-f",
    "paths",
    multiple=True,
    required=True,
    help="Dotted selection path, e.g. users.threads.title. Repeatable.",
)
@click.option(
    "--arg",
    "-a",
    "arguments",
    multiple=True,
    help="Argument for a field, as PATH:KEY=VALUE. Repeatable.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the JSON request body instead of the query text.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def render(operation_type, name, paths, arguments, as_json, verbose):
    """Render a GraphQL operation from selection paths.

    Examples:

        gql-pybuild render -f users.id -f users.username

        gql-pybuild render -n another_test -f users.threads.title \\
            -a 'users.threads:title=A Good Title' --json
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    roots = fields_from_paths(*paths)
    for spec in arguments:
        path, argument = parse_argument(spec)
        target = find_field(roots, path)
        if target is None:
            raise click.BadParameter(
                f"no field at '{path}'; add it with --field first", param_hint="--arg"
            )
        target.add_arguments(argument)

    query = Query(operation_type, name, roots)
    if verbose:
        click.echo(f"Fields: {len(paths)}, arguments: {len(arguments)}", err=True)

    try:
        output = query.to_json_body() if as_json else query.render_to_string()
    except GraphQLBuilderError as exc:
        raise click.ClickException(exc.message) from exc

    click.echo(output)


if __name__ == "__main__":
    main()
