"""API routes package."""

from filestore.routes.file_routes import router as file_router

__all__ = ["file_router"]
