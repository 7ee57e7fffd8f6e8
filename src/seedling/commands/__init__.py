"""Command implementations for the Seedling CLI."""
