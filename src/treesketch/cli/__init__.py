"""Command-line interface for treesketch."""
