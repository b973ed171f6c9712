"""Platform integrations shared across tailr layers."""
