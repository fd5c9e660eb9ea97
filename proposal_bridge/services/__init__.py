"""Services module - Mapping and orchestration."""
