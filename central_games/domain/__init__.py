"""Domain layer (pure logic).

- Keep loyalty-category policy and transition rules here.
- Avoid I/O: no settings lookups, no logging configuration.
- Prefer deterministic functions (thresholds passed in as arguments).
"""
