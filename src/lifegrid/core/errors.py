"""Exceptions raised by the simulation engine."""


class InvalidConfiguration(ValueError):
    """Raised when a simulation is configured or seeded with impossible values.

    Subclasses ValueError so callers that already guard against bad
    arguments keep working.
    """
