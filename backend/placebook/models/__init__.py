"""SQLAlchemy models exposed for metadata creation and imports."""
from .location import Location
from .user import User

__all__ = ["User", "Location"]
