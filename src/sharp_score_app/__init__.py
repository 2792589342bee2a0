"""Command-line entry point for sharp-score."""
