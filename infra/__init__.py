"""Process-level plumbing: logging and settings."""
