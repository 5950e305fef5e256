"""Project Django apps."""
