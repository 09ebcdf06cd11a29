"""Detective Quest: explore a mansion, collect clues and accuse a suspect."""

__version__ = "1.0.0"
__all__ = ["__version__"]