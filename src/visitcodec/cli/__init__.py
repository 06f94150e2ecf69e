"""Command-line interface for visitcodec."""
