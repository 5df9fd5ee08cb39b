"""kickstart - Scaffold new projects from starter templates."""

__version__ = "0.3.0"
