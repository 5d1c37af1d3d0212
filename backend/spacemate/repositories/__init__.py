"""Property and booking repositories (in-memory and SQL implementations)."""

from spacemate.repositories.base import BookingRepository, PropertyRepository
from spacemate.repositories.memory import (
    InMemoryBookingRepository,
    InMemoryPropertyRepository,
    InMemoryStore,
)
from spacemate.repositories.sql import SqlBookingRepository, SqlPropertyRepository

__all__ = [
    "BookingRepository",
    "InMemoryBookingRepository",
    "InMemoryPropertyRepository",
    "InMemoryStore",
    "PropertyRepository",
    "SqlBookingRepository",
    "SqlPropertyRepository",
]
