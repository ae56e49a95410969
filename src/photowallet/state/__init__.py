"""State/store layer.

This package holds the single source of truth for the wallet: the store
that owns and mutates the current snapshot, and the events that report how
well that snapshot is being persisted.
"""
