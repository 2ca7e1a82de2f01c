"""Core infrastructure: well-known paths, configuration, theme and logging."""
