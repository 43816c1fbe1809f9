"""Command implementations for the hoopreplay CLI."""
