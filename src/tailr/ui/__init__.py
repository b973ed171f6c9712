"""User interfaces for tailr."""
