"""Build and serialize GraphQL query, mutation and subscription documents."""
