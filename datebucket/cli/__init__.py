"""Command line interface for datebucket."""
