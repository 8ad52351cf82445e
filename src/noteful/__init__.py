"""
Noteful Backend - folders and notes REST API

CRUD over folders and the notes filed under them, guarded by a static
bearer token, with HTML sanitization of every user supplied field.
"""

__version__ = "1.0.0"
