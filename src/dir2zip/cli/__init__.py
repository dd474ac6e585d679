"""Command-line interface for dir2zip."""
