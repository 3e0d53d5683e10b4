"""Command-line interface for Style Rank."""
