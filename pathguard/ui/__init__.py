"""Console rendering for the pathguard CLI."""

from .console import ConsoleManager, PathReport

__all__ = ["ConsoleManager", "PathReport"]
