"""Shared libraries for the CRM services.

Subpackages:
- ``libs.common``: configuration, logging, and metrics.
- ``libs.contacts``: contact records, email validation, store and lookup.

Notes:
- Avoid transport-specific logic; keep HTTP concerns in the service apps.
"""
