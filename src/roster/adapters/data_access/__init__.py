"""Data-access adapters for ROSTER."""

from .sqlalchemy_adapter import SqlAlchemyDataAccess

__all__ = ["SqlAlchemyDataAccess"]
