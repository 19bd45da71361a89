"""Infrastructure Layer - messaging and persistence adapters."""
