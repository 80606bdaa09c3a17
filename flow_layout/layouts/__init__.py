"""Layout algorithms."""
