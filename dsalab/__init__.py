"""Classic data structures and algorithms, with an interactive menu command for the containers."""

__version__ = "1.0.0"