"""Command-line interface for langver."""
