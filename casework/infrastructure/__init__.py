"""Infrastructure layer - database and repository adapters."""
