"""Route modules for the Placebook API."""
from . import auth, locations, meta

__all__ = ["auth", "locations", "meta"]
