"""Shared primitives (errors, logging, env parsing) for sumup-cli packages."""
