"""Services — orchestration between the HTTP layer and storage contracts.

Invariants:
    - Services depend on core/ protocols, never on a concrete repository type
"""
