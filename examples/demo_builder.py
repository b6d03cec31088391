#!/usr/bin/env python3
"""Demonstration of the GraphQL document builders.

This script shows how to:
1. Build a query from dataclass literals
2. Build the same kind of query with options and with chaining
3. Stream the rendered text and produce a JSON request body

Note: This demo doesn't make real API calls - it only builds requests.
"""

from gql_pybuild.core import (
    Field,
    GraphQLBuilderError,
    Query,
    TYPE_MUTATION,
    TYPE_QUERY,
    argument_int,
    argument_string,
    argument_string_list,
    fields,
    make_field,
    make_query,
    new_query,
    of_arguments,
    of_field,
    of_fields,
    of_name,
)


def main():
    print("=== GraphQL Builder Demo ===\n")

    print("1. Literal construction")
    literal = Query(
        TYPE_QUERY,
        fields=[
            Field(
                "courses",
                alias="Alias",
                arguments=[
                    argument_int("uid", 123),
                    argument_string_list("blocked_nds", "nd013", "nd014"),
                ],
                fields=fields("key", "id"),
            ),
        ],
    )
    print(f"   {literal.render_to_string()}")

    print("\n2. Option construction")
    options = new_query(
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
    print(f"   {options.to_json_body()}")

    print("\n3. Chained construction, streamed")
    chained = make_query(TYPE_MUTATION).set_operation_name("rename").set_fields(
        make_field("renameUser")
        .add_argument_int("id", 7)
        .add_argument_string("name", "Ada")
        .add_fields(make_field("id"), make_field("name")),
    )
    for chunk in chained.render():
        print(f"   chunk: {chunk!r}")

    print("\n4. A cycle is rejected before anything is rendered")
    node = Field("node")
    node.add_fields(node)
    try:
        Query(TYPE_QUERY, fields=[node]).render()
    except GraphQLBuilderError as exc:
        print(f"   error: {exc}")


if __name__ == "__main__":
    main()
