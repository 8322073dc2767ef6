"""Tests for the CRM contact services.

This package contains unit tests for the contact lookup core and shared
utilities, HTTP tests for the contacts service, and contract tests that
check the generated OpenAPI document.
"""
