"""Hello API Application Package: validating echo endpoints.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
