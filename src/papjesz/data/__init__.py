"""Bundled mascots and corpus."""
