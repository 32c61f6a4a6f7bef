"""
Learning bounded context - Domain layer.

This context handles flashcard study data:
- Stacks and their flashcards
- Study sessions recorded against a stack
- Folding the stack/flashcard/study-session join into aggregates

Aggregates:
- Stack: owns its flashcards and study sessions
"""
