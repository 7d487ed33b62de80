"""Organizer API: task organizer backend on FastAPI and MongoDB."""
