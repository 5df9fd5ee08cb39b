"""kickstart CLI commands."""
