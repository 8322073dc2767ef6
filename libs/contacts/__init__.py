"""Contact lookup core.

Primary components:
- ``models``: ``Contact`` record and the tagged ``LookupResult``.
- ``validation``: ``is_valid_email`` syntax predicate.
- ``store``: immutable ``ContactStore`` plus seed data loaders.
- ``lookup``: ``ContactLookupService`` composing validation and store.

Guidance:
- Build the store once at startup and hand it to ``ContactLookupService``;
  nothing in this package mutates contacts after construction.
"""
