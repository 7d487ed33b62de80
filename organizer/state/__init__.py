"""
Organizer API - State Module

Server-side aggregation of a user's visible data.
"""
