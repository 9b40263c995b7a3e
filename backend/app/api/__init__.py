from app.api import rewrite_routes

__all__ = [
    "rewrite_routes",
]
