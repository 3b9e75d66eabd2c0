"""cc-skill - Claude Skills Manager."""

__version__ = "1.0.0"
