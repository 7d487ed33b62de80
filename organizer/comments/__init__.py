"""
Organizer API - Comments Module
"""

from organizer.comments.router import router as comments_router

__all__ = ["comments_router"]
