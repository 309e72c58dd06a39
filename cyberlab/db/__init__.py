"""In-memory data store."""
