"""Flashcard study data layer: stacks, flashcards and study sessions behind a stack cache."""
