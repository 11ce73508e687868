"""Command-line interface for base2048."""
