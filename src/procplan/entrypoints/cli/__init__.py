"""Command-line interface for PROCPLAN."""
