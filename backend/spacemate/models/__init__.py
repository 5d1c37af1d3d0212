"""SQLAlchemy models for SpaceMate.

All models are imported here so that ``Base.metadata.create_all`` can
discover them. If you add a new model, import it in this file.
"""

from spacemate.models.booking import Booking
from spacemate.models.property import Property

__all__ = [
    "Booking",
    "Property",
]
