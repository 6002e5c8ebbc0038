"""Command-line interface for DevRadar."""
