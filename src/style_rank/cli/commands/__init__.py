"""CLI commands for Style Rank."""
