"""Command-line interface for Papjesz."""
