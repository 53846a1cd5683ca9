"""Read-only catalog of UI framework hooks and the navigation built from it."""

__version__ = "1.0.0"
