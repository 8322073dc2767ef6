"""API contract tests.

These tests validate that public endpoints conform to the generated OpenAPI
document and remain stable across releases. They focus on shape and
semantics rather than specific contact data.
"""
