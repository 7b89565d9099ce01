"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - SQLAlchemy exceptions never escape unmapped (see database.py)
"""
