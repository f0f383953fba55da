"""Command-line interface for debugfmt."""
