"""
This package contains repository implementations for MongoDB access.

Repositories hold a collection (or database) handle and translate each portal
operation into one query against it. They raise the domain errors from
``portals.exceptions`` and let driver errors propagate.
"""
