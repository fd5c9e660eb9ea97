"""API module - HTTP entry points."""
