"""Shared Application Layer components."""

from .command import Command
from .handler import CommandHandler, QueryHandler
from .query import Query

__all__ = [
    "Command",
    "Query",
    "CommandHandler",
    "QueryHandler",
]
