"""Command-line interface for chromapick."""
