"""Employee directory: GraphQL API over an in-memory staff list."""
