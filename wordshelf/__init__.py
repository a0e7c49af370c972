"""wordshelf: vocabulary flashcards with quiz and read-aloud review."""
