"""Command line tools for npm-score."""
