"""Core infrastructure: settings, logging, security and the entity store."""
