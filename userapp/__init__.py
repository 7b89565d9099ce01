"""User App Package — HTTP resource service for User records.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
