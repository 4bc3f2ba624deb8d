"""Database Declarations - the SQLAlchemy Base shared by every model.

Invariants:
    - Engine and sessions live in infrastructure/database.py, not here

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local runs and tests
"""
