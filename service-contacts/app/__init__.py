"""Contacts service package.

Layout:
- ``api``: HTTP endpoints for contact lookup and listing.
- ``runtime``: service-local metrics and runtime helpers.
"""
