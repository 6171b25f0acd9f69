"""Core: configuration, domain models, errors and the lookup service."""
