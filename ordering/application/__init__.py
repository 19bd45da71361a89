"""Application Layer - use cases orchestrating the domain."""
