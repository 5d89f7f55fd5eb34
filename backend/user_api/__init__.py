"""User API Package — CRUD REST service for the user resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
