"""Local services used by commands (git)."""
