"""Builders that turn API models into table models."""
