"""Adapters (infrastructure) for ROSTER.

Provide concrete implementations of the data-access port, plus the engine
factory, table metadata and Alembic migrations behind it.

Dependency rule: may import `roster.domain` and `roster.interfaces`; neither
of those may import this package.
"""
