"""Configuration, logging, messages and the shared in-memory repository."""
