"""Command-line and terminal UI layer for the SumUp CLI."""
