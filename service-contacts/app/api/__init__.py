"""API subpackage for the contacts service.

Routers expose contact lookup by email and the full contact listing.
Transport layer remains thin and delegates to ``ContactLookupService``.
"""
