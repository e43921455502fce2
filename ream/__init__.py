"""Beacon chain consensus primitives, SSZ hashing, a task executor and an execution engine API client."""

__version__ = "0.1.0"