"""Small programming exercises: savings, geometry, bits, text, files, games and poker hands."""

__version__ = "0.1.0"