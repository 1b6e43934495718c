"""Persistence-backed managers for the workspace core.

Each module wraps one store key (or a small group of keys) with typed reads
and writes.  Managers accept the store as a parameter or constructor argument
and let store errors (``StoreError``) propagate -- deciding what a failed
write means is the caller's responsibility.
"""
