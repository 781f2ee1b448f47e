"""Personal study tracking service."""
