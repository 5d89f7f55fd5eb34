"""Services Layer — use cases orchestrating repositories around core rules.

Invariants:
    - Services depend on repository Protocols, never on a concrete session
    - Routes call services; services never build HTTP responses
"""
