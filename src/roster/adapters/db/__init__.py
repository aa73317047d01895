"""Database engine, table metadata, schema and migrations for ROSTER."""
