"""FastAPI routers acting as controllers in the MVC architecture."""

from . import frontend, health, submissions

__all__ = ["frontend", "health", "submissions"]
