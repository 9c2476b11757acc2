"""
Learning bounded context - Domain layer.

This context handles flashcard sets and practice:
- Set and card management
- Review outcomes and the set's running score

Aggregates:
- FlashcardSet: owns its Cards and their review statistics
"""
