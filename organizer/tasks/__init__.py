"""
Organizer API - Tasks Module

Task listing, creation and merge-style updates.
"""

from organizer.tasks.router import router as tasks_router

__all__ = ["tasks_router"]
