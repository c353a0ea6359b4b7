"""Rule engine and game session for a 2048-style sliding tile puzzle."""
