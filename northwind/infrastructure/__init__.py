"""Infrastructure - database lifecycle and logging."""
