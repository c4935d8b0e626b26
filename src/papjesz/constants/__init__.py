"""Module-level constants shared across Papjesz."""
