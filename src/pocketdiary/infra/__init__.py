"""Infrastructure adapters (database engine, repositories)."""
