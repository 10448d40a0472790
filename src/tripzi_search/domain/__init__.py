"""Domain models, errors and services."""
