"""Core building blocks: enums, errors, text helpers and the query engine."""
