"""Purchasing use cases (commands, queries, handlers, DTOs)."""
