"""Chat, user presence, SQLite storage and class scaffolding for a pair-programming editor."""

__version__ = "0.1.0"