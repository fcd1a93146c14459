"""
Boundary layer for external system integrations.

Handles all interactions with the relational database backing the
image ranking store.
"""
