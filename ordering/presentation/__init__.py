"""Presentation Layer - HTTP API."""
