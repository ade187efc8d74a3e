"""
Version 1 of the API.

This subpackage bundles the account and message endpoints.  Breaking
changes to the published routes should go into a new version
subpackage (e.g. ``v2``).
"""
