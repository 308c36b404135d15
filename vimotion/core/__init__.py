"""Core definitions shared across vimotion."""
