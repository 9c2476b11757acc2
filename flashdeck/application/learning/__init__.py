"""
Learning bounded context - Application layer.

Use cases for flashcard sets and card practice, the access gate they go
through and the repository protocol they depend on.
"""
