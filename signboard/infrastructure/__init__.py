"""Infrastructure layer - adapters and stubs for Signboard ports."""
