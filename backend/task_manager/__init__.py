"""Task Manager — REST API for authored tasks.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
