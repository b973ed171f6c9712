"""Application layer coordinating features for the CLI."""
