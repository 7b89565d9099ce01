"""Pydantic Schemas — wire contracts for the HTTP boundary.

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
