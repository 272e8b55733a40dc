"""Core infrastructure: logging, exceptions, paths, temporary files and CLI stats."""
