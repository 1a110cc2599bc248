"""Command-line interface for repo2tree."""
