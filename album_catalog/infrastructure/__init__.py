"""Infrastructure — database engine, storage adapter, logging setup."""
