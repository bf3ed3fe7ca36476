"""Core configuration, logging and metrics."""
