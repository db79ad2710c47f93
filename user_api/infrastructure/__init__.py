"""Infrastructure — process-level concerns (logging setup)."""
