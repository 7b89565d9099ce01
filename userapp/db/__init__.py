"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - Engines are owned by DatabaseSessionManager (infrastructure/database.py)
"""
