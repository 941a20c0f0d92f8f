"""Adapters – catalog executors for concrete backends."""
