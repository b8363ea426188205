"""Database Package — declarative Base and session factory helpers."""
