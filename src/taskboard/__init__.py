"""taskboard: a console task tracker backed by a remote CRUD service."""

__version__ = "0.1.0"
