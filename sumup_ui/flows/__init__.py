"""Interactive workflows composed from UI components and app services."""
