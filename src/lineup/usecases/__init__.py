"""
Application use cases.

Each module exposes plain functions taking a SQLAlchemy ``Session`` and
returning JSON-friendly dictionaries for the CLI and the player.
"""
