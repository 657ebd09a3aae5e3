"""Frontend interfaces for the simulation engine."""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
