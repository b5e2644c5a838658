"""Core data models, configuration and exceptions."""
