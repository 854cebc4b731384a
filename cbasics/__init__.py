"""Classic programming exercises: numbers, text, conversions, searching, sorting and a small CLI."""

__version__ = "0.1.0"