"""Application setup (config, database, DI, logging)."""
